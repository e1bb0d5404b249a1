"""Pydantic schemas for API request/response validation."""

from .feed import FeedCheese, FeedItem, FeedItemType, FeedRequest, FeedResponse
from .health import HealthResponse
from .search import (
    MODE_KINDS,
    RecordKind,
    SearchableRecord,
    SearchMode,
    SearchRequest,
    SearchResponse,
    SearchResult,
)

__all__ = [
    # Health
    "HealthResponse",
    # Search
    "MODE_KINDS",
    "RecordKind",
    "SearchableRecord",
    "SearchMode",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    # Feed
    "FeedCheese",
    "FeedItem",
    "FeedItemType",
    "FeedRequest",
    "FeedResponse",
]
