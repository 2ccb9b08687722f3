"""Text processing utilities."""

import re
from dataclasses import dataclass

# Delimiters used when splitting a query into words.
_TOKEN_SPLIT = re.compile(r"[\s,.!?;:\"'()]+")

STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does",
    "did", "will", "would", "could", "should", "may", "might", "must", "can", "shall",
})


@dataclass(frozen=True)
class NormalizedQuery:
    """Lowercased query text plus its filtered word sequence."""

    lowered: str
    tokens: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        return not self.lowered


def normalize_text(text: str) -> str:
    """
    Normalize text for processing.

    Args:
        text: Input text

    Returns:
        Normalized text
    """
    # Remove extra whitespace
    text = re.sub(r"\s+", " ", text)
    # Trim
    text = text.strip()
    return text


def is_stop_word(word: str) -> bool:
    return word in STOP_WORDS


def tokenize(text: str) -> tuple[str, ...]:
    """
    Split lowercase text into words.

    Tokens of length <= 1 and stop words are dropped. Hyphens stay inside
    tokens, so "over-exploited" is a single word.

    Args:
        text: Lowercase input text

    Returns:
        Tuple of tokens in input order
    """
    if not text:
        return ()
    return tuple(
        token
        for token in _TOKEN_SPLIT.split(text)
        if len(token) > 1 and not is_stop_word(token)
    )


def normalize_query(raw: str | None) -> NormalizedQuery:
    """Lowercase a raw query and tokenize it. None yields an empty query."""
    if not raw:
        return NormalizedQuery(lowered="", tokens=())
    lowered = raw.lower()
    return NormalizedQuery(lowered=lowered, tokens=tokenize(lowered))
