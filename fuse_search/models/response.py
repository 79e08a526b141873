"""Result and response models."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MatchResult(BaseModel):
    """Outcome of matching a pattern against a single text."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0.0, le=1.0, description="Match score (0 = exact)")
    ranges: List[Tuple[int, int]] = Field(
        ..., description="Inclusive (start, end) positions of matched characters"
    )


class SearchResult(MatchResult):
    """Match of a batch candidate, tagged with its position in the batch."""

    index: int = Field(..., ge=0, description="Index of the candidate in the input list")


class MatchResponse(BaseModel):
    """Response for single-text searches."""

    pattern: str = Field(..., description="Original pattern")
    matched: bool = Field(..., description="Whether the pattern was found")
    score: Optional[float] = Field(None, description="Match score when matched")
    ranges: List[Tuple[int, int]] = Field(default_factory=list, description="Matched ranges")
    execution_time_ms: float = Field(..., description="Search time in milliseconds")


class BatchSearchResponse(BaseModel):
    """Response for batch searches."""

    pattern: str = Field(..., description="Original pattern")
    total_candidates: int = Field(..., description="Number of candidates searched")
    total_results: int = Field(..., description="Number of matching candidates")
    results: List[SearchResult] = Field(..., description="Matches ordered by ascending score")
    execution_time_ms: float = Field(..., description="Search time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
