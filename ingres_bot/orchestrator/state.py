"""Engine result model."""

import copy
from dataclasses import dataclass, field

from ingres_bot.config.constants import Intent, QueryStatus


@dataclass
class QueryResult:
    """Outcome of processing one query."""

    # Input
    raw_input: str | None
    session_id: str | None = None

    # Classification
    intent: Intent = Intent.UNKNOWN
    confidence: float = 0.0

    # Location
    location: str | None = None  # state, else district, else carried from context
    state: str | None = None
    district: str | None = None
    block: str | None = None
    locations_found: list[str] = field(default_factory=list)

    # Clarification
    requires_clarification: bool = False
    clarification_text: str | None = None

    # Outcome
    status: QueryStatus = QueryStatus.COMPLETED
    from_cache: bool = False
    error: str | None = None
    processing_time_ms: float = 0.0

    def clone(self) -> "QueryResult":
        """Independent copy; mutating the clone never affects the original."""
        return copy.deepcopy(self)
