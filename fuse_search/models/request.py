"""Request and option models for the search engine and its API."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchOptions(BaseModel):
    """Immutable engine configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    location: int = Field(default=0, ge=0, description="Expected offset of the match")
    distance: int = Field(
        default=100,
        ge=0,
        description="Drift from location that scores as a mismatch; 0 demands the exact location",
    )
    threshold: float = Field(
        default=0.6, ge=0.0, le=1.0, description="Score above which a candidate is rejected"
    )
    case_sensitive: bool = Field(default=False, description="Disable case folding")
    tokenize: bool = Field(default=False, description="Average the full pattern with each of its words")


class SearchRequest(BaseModel):
    """Request model for matching one pattern against one text."""

    pattern: str = Field(..., min_length=1, description="Pattern to search for")
    text: str = Field(..., description="Text to search in")
    options: Optional[SearchOptions] = Field(
        None, description="Engine options (service defaults if omitted)"
    )


class BatchSearchRequest(BaseModel):
    """Request model for matching one pattern against many candidates."""

    pattern: str = Field(..., min_length=1, description="Pattern to search for")
    candidates: List[str] = Field(..., min_length=1, description="Candidate strings")
    options: Optional[SearchOptions] = Field(
        None, description="Engine options (service defaults if omitted)"
    )
    parallel: bool = Field(default=False, description="Whether to search candidates in parallel")
