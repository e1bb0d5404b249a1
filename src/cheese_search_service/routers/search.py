"""Search API endpoints.

Provides synonym-aware fuzzy search over a candidate pool supplied by the
caller (the app fetches candidates from storage first).

Endpoints:
- POST /api/v1/search: Rank candidates for a query, or shuffle them for discovery
"""

import random
import time

from fastapi import APIRouter, Depends, HTTPException, status

from cheese_search_service.config import settings
from cheese_search_service.logging_config import get_logger
from cheese_search_service.schemas.search import (
    SearchRequest,
    SearchResponse,
    SearchResult,
)
from cheese_search_service.search import ScoredRecord, SearchEngine

router = APIRouter(prefix=settings.api_v1_prefix, tags=["search"])
logger = get_logger(__name__)


# Singleton search engine
_search_engine: SearchEngine | None = None


def get_search_engine() -> SearchEngine:
    """Get or create the search engine.

    The engine only holds read-only configuration, so one instance is
    shared by all requests.
    """
    global _search_engine
    if _search_engine is None:
        _search_engine = SearchEngine(
            thresholds=settings.fuzzy_thresholds,
            max_candidates=settings.search_max_candidates,
            default_limit=settings.search_default_limit,
            discovery_limit=settings.search_discovery_limit,
            suggestion_threshold=settings.search_suggestion_threshold,
            suggestion_limit=settings.search_suggestion_limit,
        )
    return _search_engine


def _to_result(scored: ScoredRecord) -> SearchResult:
    return SearchResult(
        id=scored.record.id,
        kind=scored.record.kind,
        score=scored.score,
        title=scored.record.title,
    )


@router.post(
    "/search",
    response_model=SearchResponse,
    status_code=status.HTTP_200_OK,
    summary="Search the cheese catalog",
    description="""
Rank the posted candidate records against a free-text query.

- Query terms are expanded with known synonyms and misspellings
  ("mozarella" also searches "mozzarella", "goat" also searches "chèvre")
- Each field is fuzzy-matched with typo tolerance and weighted
  (title > type/category/flavor > aroma > description > producer > origin)
- Records matching nothing are left out
- With an empty query the candidates are returned shuffled (discovery mode)

An empty candidate pool returns an empty result, not an error.
    """,
)
async def search_catalog(
    request: SearchRequest,
    engine: SearchEngine = Depends(get_search_engine),
) -> SearchResponse:
    """Search the candidate pool.

    Args:
        request: Query, candidate pool and options
        engine: Shared search engine

    Returns:
        SearchResponse with ranked (or shuffled) results

    Raises:
        HTTPException 500: If search fails unexpectedly
    """
    start = time.perf_counter()
    rng = random.Random(request.seed) if request.seed is not None else None

    try:
        outcome = engine.search(
            request.query,
            request.records,
            mode=request.mode,
            limit=request.limit,
            rng=rng,
        )
    except Exception as e:
        logger.error(
            "search.endpoint.failed",
            query=(request.query or "")[:100],
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Search failed: {str(e)}",
        ) from e

    return SearchResponse(
        query=request.query,
        results=[_to_result(s) for s in outcome.results],
        suggestions=[_to_result(s) for s in outcome.suggestions],
        discovery=outcome.discovery,
        total_candidates=outcome.total_candidates,
        timing_ms=int((time.perf_counter() - start) * 1000),
    )
