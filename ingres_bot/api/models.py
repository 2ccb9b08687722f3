"""Request/Response models for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request model for chat endpoint."""

    message: str = Field("", description="User's natural language question")
    session_id: str | None = Field(None, description="Conversation identifier")


class ChatResponse(BaseModel):
    """Response model for chat endpoint."""

    message: str = Field(..., description="Answer text")
    intent: str = Field(..., description="Classified intent")
    confidence: float = Field(..., ge=0.0, description="Classifier confidence")
    processing_time_ms: float = Field(..., description="Engine processing time")
    location: str | None = Field(None, description="Primary location of the query")
    has_data: bool = Field(False, description="Answer was built from assessment records")
    requires_clarification: bool = Field(False, description="Whether the query was unclear")
    clarification_question: str | None = Field(None, description="Prompt asking the user to rephrase")
    from_cache: bool = Field(False, description="Served from the response cache")
    session_id: str | None = Field(None, description="Conversation identifier")
    status: str = Field(..., description="completed, rejected or failed")


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime_seconds: float = Field(..., description="Seconds since startup")
    active_requests: int = Field(..., description="Requests currently in flight")
    cache_size: int = Field(..., description="Live response cache entries")
    cache_hit_rate: float = Field(..., description="Repeat accesses over total accesses")
    intent_types: int = Field(..., description="Number of known intents")
    sessions: int = Field(..., description="Active conversation contexts")


class SessionResponse(BaseModel):
    """Conversation context summary."""

    session_id: str
    history: list[str] = []
    last_intent: str
    last_location: str | None = None
    last_state: str | None = None
    last_district: str | None = None
    query_count: int = 0
    session_start: float
    awaiting_clarification: bool = False
    pending_question: str | None = None


class CacheStatsResponse(BaseModel):
    """Response cache statistics."""

    enabled: bool
    stats: dict[str, Any] = {}


class CapabilitiesResponse(BaseModel):
    """What the assistant can answer."""

    capabilities: list[str]
    total_intents: int = Field(..., description="Number of known intents")
    pattern_count: int = Field(..., description="Patterns in the intent table")
    states_with_data: int = Field(..., description="States covered by the assessment data")
