"""Feed API endpoints.

Endpoints:
- POST /api/v1/feed: Interleave ranked streams into the home feed
"""

from fastapi import APIRouter, HTTPException, status

from cheese_search_service.config import settings
from cheese_search_service.feed import build_feed
from cheese_search_service.logging_config import get_logger
from cheese_search_service.schemas.feed import FeedRequest, FeedResponse

router = APIRouter(prefix=settings.api_v1_prefix, tags=["feed"])
logger = get_logger(__name__)


@router.post(
    "/feed",
    response_model=FeedResponse,
    status_code=status.HTTP_200_OK,
    summary="Build the home feed",
    description="""
Merge the recommender's ranked streams into one feed.

Pattern per round: 3 cheeses, 1 article, 3 cheeses, 1 sponsored item.
Cheese streams (following, recommendations, trending, discovery, awards)
are read in that order as one stream. Any id already placed is skipped,
so overlapping streams never produce duplicates.
    """,
)
async def get_feed(request: FeedRequest) -> FeedResponse:
    """Build the interleaved feed.

    Args:
        request: Ranked candidate lists per stream

    Returns:
        FeedResponse with items in display order
    """
    try:
        items = build_feed(request, pattern=settings.feed_pattern)
    except Exception as e:
        logger.error("feed.endpoint.failed", error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Feed assembly failed: {str(e)}",
        ) from e

    return FeedResponse(items=items, total=len(items))
