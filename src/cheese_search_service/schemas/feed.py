"""Feed request and response schemas.

The recommender ranks each stream upstream; the feed endpoint only merges
them into one deduplicated sequence.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FeedItemType(str, Enum):
    """Origin stream of a feed item."""

    FOLLOWING = "following"
    RECOMMENDATION = "recommendation"
    TRENDING = "trending"
    DISCOVERY = "discovery"
    AWARD_WINNER = "award_winner"
    ARTICLE = "article"
    SPONSORED = "sponsored"


class FeedCheese(BaseModel):
    """Cheese payload carried by primary-stream items."""

    id: str
    full_name: str | None = None
    cheese_type_name: str | None = None
    producer_name: str | None = None
    origin_country: str | None = None
    average_rating: float = 0.0
    rating_count: int = 0


class FeedItem(BaseModel):
    """One item of any feed stream, identified by ``id`` across streams."""

    id: str = Field(..., min_length=1, description="Item identifier, unique across streams")
    type: FeedItemType = Field(..., description="Stream the item came from")
    title: str | None = Field(default=None, description="Display title")
    reason: str | None = Field(default=None, description="Why the item was recommended")
    cheese: FeedCheese | None = None
    brand_name: str | None = Field(default=None, description="Sponsor brand")


class FeedRequest(BaseModel):
    """Ranked candidate lists, one per stream.

    following, recommendations, trending, discovery and awards form the
    primary stream, concatenated in that order.
    """

    following: list[FeedItem] = Field(default_factory=list)
    recommendations: list[FeedItem] = Field(default_factory=list)
    trending: list[FeedItem] = Field(default_factory=list)
    discovery: list[FeedItem] = Field(default_factory=list)
    awards: list[FeedItem] = Field(default_factory=list)
    articles: list[FeedItem] = Field(default_factory=list)
    sponsored: list[FeedItem] = Field(default_factory=list)


class FeedResponse(BaseModel):
    """Interleaved feed."""

    items: list[FeedItem] = Field(default_factory=list, description="Feed in display order")
    total: int = Field(..., ge=0, description="Number of items")
