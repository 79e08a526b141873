"""Data models for fuse_search."""

from .request import BatchSearchRequest, SearchOptions, SearchRequest
from .response import (
    BatchSearchResponse,
    ErrorResponse,
    HealthResponse,
    MatchResponse,
    MatchResult,
    SearchResult,
)

__all__ = [
    "SearchOptions",
    "SearchRequest",
    "BatchSearchRequest",
    "MatchResult",
    "SearchResult",
    "MatchResponse",
    "BatchSearchResponse",
    "ErrorResponse",
    "HealthResponse",
]
