"""Home feed assembly from ranked content streams."""

from .interleaver import (
    DEFAULT_PATTERN,
    FeedPattern,
    build_feed,
    cheese_display_name,
    interleave,
    merge_primary_streams,
)

__all__ = [
    "DEFAULT_PATTERN",
    "FeedPattern",
    "build_feed",
    "cheese_display_name",
    "interleave",
    "merge_primary_streams",
]
