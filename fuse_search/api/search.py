"""Search API endpoints."""

import time
from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException

from ..config import get_settings
from ..core.engine import SearchEngine
from ..engine_instance import search_engine
from ..exceptions import FuseSearchError
from ..models.request import BatchSearchRequest, SearchOptions, SearchRequest
from ..models.response import BatchSearchResponse, MatchResponse

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()
logger = structlog.get_logger(__name__)


def _engine_for(options: Optional[SearchOptions]) -> SearchEngine:
    """Use the shared engine unless the request carries its own options."""
    if options is None:
        return search_engine

    return SearchEngine(
        options,
        max_pattern_length=search_engine.max_pattern_length,
        max_workers=search_engine.max_workers,
    )


@router.post(
    "/search",
    response_model=MatchResponse,
    summary="Match a pattern against a text",
    description="Approximately locate a pattern in a single text and return its score and ranges"
)
async def search_text(request: SearchRequest) -> MatchResponse:
    """
    Search for a pattern in a single text.

    Returns whether the pattern matched, its score (0 = exact) and the
    character ranges to highlight.
    """
    start_time = time.time()
    engine = _engine_for(request.options)

    try:
        pattern = engine.create_pattern(request.pattern)
    except FuseSearchError as e:
        raise HTTPException(status_code=400, detail=e.message)

    result = engine.search(pattern, request.text)
    execution_time = (time.time() - start_time) * 1000

    if result is None:
        return MatchResponse(
            pattern=request.pattern,
            matched=False,
            execution_time_ms=execution_time,
        )

    return MatchResponse(
        pattern=request.pattern,
        matched=True,
        score=result.score,
        ranges=result.ranges,
        execution_time_ms=execution_time,
    )


@router.post(
    "/search/batch",
    response_model=BatchSearchResponse,
    summary="Batch search",
    description="Match one pattern against many candidates, sorted by score"
)
async def batch_search(request: BatchSearchRequest) -> BatchSearchResponse:
    """
    Search for a pattern in each candidate string.

    Candidates that do not match are left out; the rest are ordered from
    best to worst score and carry their index in the request.
    """
    if len(request.candidates) > settings.max_candidates:
        raise HTTPException(
            status_code=400,
            detail=f"Too many candidates. Maximum is {settings.max_candidates}"
        )

    start_time = time.time()
    engine = _engine_for(request.options)

    try:
        pattern = engine.create_pattern(request.pattern)
    except FuseSearchError as e:
        raise HTTPException(status_code=400, detail=e.message)

    results = engine.search_many(pattern, request.candidates, parallel=request.parallel)
    execution_time = (time.time() - start_time) * 1000

    logger.info(
        "batch_search",
        total_candidates=len(request.candidates),
        total_results=len(results),
        execution_time_ms=round(execution_time, 2),
    )

    return BatchSearchResponse(
        pattern=request.pattern,
        total_candidates=len(request.candidates),
        total_results=len(results),
        results=results,
        execution_time_ms=execution_time,
    )
