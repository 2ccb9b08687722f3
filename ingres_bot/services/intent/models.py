"""Intent service models."""

from dataclasses import dataclass

from ingres_bot.config.constants import Intent


@dataclass(frozen=True)
class IntentPattern:
    """A static scoring rule for one intent candidate."""

    intent: Intent
    keywords: tuple[str, ...]
    synonyms: tuple[str, ...] = ()
    context_keywords: tuple[str, ...] = ()
    priority: int = 10
    min_confidence: float = 0.6
    require_all: bool = False
    context_dependent: bool = False
    examples: tuple[str, ...] = ()

    @property
    def term_count(self) -> int:
        """Number of keyword and synonym phrases (used to normalize scores)."""
        return len(self.keywords) + len(self.synonyms)


@dataclass(frozen=True)
class ScoredResult:
    """Result from intent classification."""

    intent: Intent
    confidence: float
    pattern_index: int | None = None  # table index of the winning pattern
