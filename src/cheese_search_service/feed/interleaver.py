"""Merge independently ranked feed streams into one deduplicated feed.

Pattern (one round, repeated):
    3 primary → 1 editorial → 3 primary → 1 sponsored

Rules:
- One read cursor per stream, advanced only by this call
- A call-local set of placed ids; an item already placed (from any stream)
  is skipped and does not count against the step's quota
- A step whose stream is exhausted contributes nothing
- The loop ends after the first round that places no item

The primary stream is the concatenation of following, recommendation,
trending, discovery and award streams, which overlap freely; the seen set
is what keeps a cheese from appearing twice.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from cheese_search_service.logging_config import get_logger
from cheese_search_service.schemas.feed import FeedCheese, FeedItem, FeedRequest

logger = get_logger(__name__)

GENERIC_PRODUCER_MARKERS = ("generic", "unknown")


@dataclass(frozen=True)
class FeedPattern:
    """Items taken from each stream per round."""

    primary_before_editorial: int = 3
    editorial_per_round: int = 1
    primary_before_sponsored: int = 3
    sponsored_per_round: int = 1


DEFAULT_PATTERN = FeedPattern()


class _Cursor:
    """Read position over one ranked stream."""

    def __init__(self, items: Sequence[FeedItem]) -> None:
        self.items = items
        self.position = 0

    def take(self, count: int, seen: set[str], output: list[FeedItem]) -> int:
        """Append up to ``count`` unseen items to ``output``; return how many."""
        taken = 0
        while taken < count and self.position < len(self.items):
            item = self.items[self.position]
            self.position += 1
            if item.id in seen:
                continue
            seen.add(item.id)
            output.append(item)
            taken += 1
        return taken


def interleave(
    primary: Sequence[FeedItem],
    editorial: Sequence[FeedItem],
    sponsored: Sequence[FeedItem],
    pattern: FeedPattern = DEFAULT_PATTERN,
) -> list[FeedItem]:
    """Interleave three ranked streams following the take-pattern.

    Args:
        primary: Merged cheese stream (see merge_primary_streams)
        editorial: Articles and recipes
        sponsored: Sponsored pairings
        pattern: Items per stream per round

    Returns:
        Deterministic, duplicate-free feed. Inputs are not mutated.

    Example:
        With 10 items in each stream the feed starts
        [P, P, P, E, P, P, P, S, P, P, ...].
    """
    primary_cursor = _Cursor(primary)
    editorial_cursor = _Cursor(editorial)
    sponsored_cursor = _Cursor(sponsored)

    steps = (
        (primary_cursor, pattern.primary_before_editorial),
        (editorial_cursor, pattern.editorial_per_round),
        (primary_cursor, pattern.primary_before_sponsored),
        (sponsored_cursor, pattern.sponsored_per_round),
    )

    seen: set[str] = set()
    output: list[FeedItem] = []

    while True:
        placed = 0
        for cursor, count in steps:
            placed += cursor.take(count, seen, output)
        if placed == 0:
            break

    return output


def merge_primary_streams(request: FeedRequest) -> list[FeedItem]:
    """Concatenate the cheese streams; social activity goes first."""
    return [
        *request.following,
        *request.recommendations,
        *request.trending,
        *request.discovery,
        *request.awards,
    ]


def cheese_display_name(cheese: FeedCheese) -> str:
    """Name to show for a cheese.

    Cheeses from a generic or unknown producer are shown by their cheese
    type ("Brie") rather than "Generic Brie".
    """
    producer = (cheese.producer_name or "").lower()
    is_generic = any(marker in producer for marker in GENERIC_PRODUCER_MARKERS)
    if is_generic and cheese.cheese_type_name:
        return cheese.cheese_type_name
    return cheese.full_name or cheese.cheese_type_name or ""


def _with_title(item: FeedItem) -> FeedItem:
    if item.title or item.cheese is None:
        return item
    return item.model_copy(update={"title": cheese_display_name(item.cheese)})


def build_feed(request: FeedRequest, pattern: FeedPattern = DEFAULT_PATTERN) -> list[FeedItem]:
    """Build the home feed from the recommender's ranked streams.

    Args:
        request: Ranked candidate lists per stream
        pattern: Items per stream per round

    Returns:
        Interleaved feed; cheese items without a title get their display name
    """
    primary = merge_primary_streams(request)
    feed = interleave(primary, request.articles, request.sponsored, pattern)

    logger.info(
        "feed.built",
        primary=len(primary),
        editorial=len(request.articles),
        sponsored=len(request.sponsored),
        items=len(feed),
        duplicates_skipped=len(primary) + len(request.articles) + len(request.sponsored) - len(feed),
    )

    return [_with_title(item) for item in feed]
