"""Unit tests for feed interleaving.

Item ids are prefixed with their stream (P/E/S) so the output pattern can
be read straight off the id list.
"""

from cheese_search_service.feed.interleaver import (
    FeedPattern,
    build_feed,
    cheese_display_name,
    interleave,
    merge_primary_streams,
)
from cheese_search_service.schemas.feed import FeedCheese, FeedItem, FeedRequest


def make_items(prefix: str, count: int, item_type: str = "recommendation") -> list[FeedItem]:
    """Helper to create ``count`` items with ids prefix0..prefixN."""
    return [FeedItem(id=f"{prefix}{i}", type=item_type) for i in range(count)]


def streams(ids: list[str]) -> str:
    """First letter of each id, e.g. "PPPEPPPS"."""
    return "".join(item_id[0] for item_id in ids)


class TestInterleavePattern:
    """Tests for the 3-1-3-1 take pattern."""

    def test_first_round_follows_pattern(self) -> None:
        feed = interleave(
            make_items("P", 10),
            make_items("E", 10, "article"),
            make_items("S", 10, "sponsored"),
        )

        assert streams([item.id for item in feed][:8]) == "PPPEPPPS"

    def test_full_output_when_primary_runs_out(self) -> None:
        feed = interleave(
            make_items("P", 7),
            make_items("E", 3, "article"),
            make_items("S", 2, "sponsored"),
        )

        ids = [item.id for item in feed]
        assert ids == [
            "P0", "P1", "P2", "E0", "P3", "P4", "P5", "S0",
            "P6", "E1", "S1",
            "E2",
        ]

    def test_primary_order_preserved(self) -> None:
        feed = interleave(make_items("P", 12), [], [])

        assert [item.id for item in feed] == [f"P{i}" for i in range(12)]

    def test_only_editorial_and_sponsored(self) -> None:
        feed = interleave([], make_items("E", 2, "article"), make_items("S", 3, "sponsored"))

        assert [item.id for item in feed] == ["E0", "S0", "E1", "S1", "S2"]

    def test_custom_pattern(self) -> None:
        pattern = FeedPattern(
            primary_before_editorial=1,
            editorial_per_round=1,
            primary_before_sponsored=0,
            sponsored_per_round=0,
        )

        feed = interleave(make_items("P", 3), make_items("E", 3, "article"), [], pattern)

        assert streams([item.id for item in feed]) == "PEPEPE"

    def test_deterministic(self) -> None:
        args = (make_items("P", 9), make_items("E", 4, "article"), make_items("S", 4, "sponsored"))

        assert interleave(*args) == interleave(*args)


class TestInterleaveDeduplication:
    """Tests for the cross-stream seen set."""

    def test_duplicate_across_streams_appears_once(self) -> None:
        shared = FeedItem(id="shared", type="trending")
        primary = [FeedItem(id="P0", type="trending"), shared]
        editorial = [FeedItem(id="shared", type="article"), FeedItem(id="E1", type="article")]

        feed = interleave(primary, editorial, [])

        ids = [item.id for item in feed]
        assert ids.count("shared") == 1
        assert ids == ["P0", "shared", "E1"]

    def test_duplicates_within_primary_skipped(self) -> None:
        primary = make_items("P", 4) + make_items("P", 4)

        feed = interleave(primary, [], [])

        assert [item.id for item in feed] == ["P0", "P1", "P2", "P3"]

    def test_skipped_duplicate_does_not_use_quota(self) -> None:
        """A duplicate is passed over and the next unseen item fills its slot."""
        primary = [
            FeedItem(id="P0", type="recommendation"),
            FeedItem(id="P0", type="trending"),
            FeedItem(id="P1", type="trending"),
            FeedItem(id="P2", type="trending"),
        ]

        feed = interleave(primary, make_items("E", 1, "article"), [])

        assert [item.id for item in feed] == ["P0", "P1", "P2", "E0"]

    def test_first_occurrence_kept(self) -> None:
        primary = [FeedItem(id="X", type="following"), FeedItem(id="X", type="award_winner")]

        feed = interleave(primary, [], [])

        assert len(feed) == 1
        assert feed[0].type == "following"

    def test_separate_calls_do_not_share_state(self) -> None:
        primary = make_items("P", 3)

        first = interleave(primary, [], [])
        second = interleave(primary, [], [])

        assert [item.id for item in first] == [item.id for item in second]


class TestInterleaveTermination:
    """Tests that the loop always ends."""

    def test_empty_inputs(self) -> None:
        assert interleave([], [], []) == []

    def test_all_duplicates(self) -> None:
        item = FeedItem(id="same", type="recommendation")

        feed = interleave([item] * 50, [item] * 50, [item] * 50)

        assert [i.id for i in feed] == ["same"]

    def test_zero_pattern(self) -> None:
        pattern = FeedPattern(0, 0, 0, 0)

        assert interleave(make_items("P", 3), [], [], pattern) == []


class TestBuildFeed:
    """Tests for build_feed and its helpers."""

    def test_primary_stream_order(self) -> None:
        request = FeedRequest(
            following=make_items("F", 1, "following"),
            recommendations=make_items("R", 1),
            trending=make_items("T", 1, "trending"),
            discovery=make_items("D", 1, "discovery"),
            awards=make_items("A", 1, "award_winner"),
        )

        primary = merge_primary_streams(request)

        assert [item.id for item in primary] == ["F0", "R0", "T0", "D0", "A0"]

    def test_overlapping_recommendation_streams(self) -> None:
        request = FeedRequest(
            recommendations=make_items("C", 3),
            trending=make_items("C", 3, "trending"),
            awards=make_items("C", 5, "award_winner"),
            articles=make_items("E", 1, "article"),
        )

        feed = build_feed(request)

        ids = [item.id for item in feed]
        assert len(ids) == len(set(ids))
        assert ids == ["C0", "C1", "C2", "E0", "C3", "C4"]

    def test_cheese_titles_filled_in(self) -> None:
        cheese = FeedCheese(
            id="pc1",
            full_name="Generic Brie",
            cheese_type_name="Brie",
            producer_name="Generic",
        )
        request = FeedRequest(
            recommendations=[FeedItem(id="pc1", type="recommendation", cheese=cheese)],
            articles=[FeedItem(id="a1", type="article", title="Rind 101")],
        )

        feed = build_feed(request)

        assert [item.title for item in feed] == ["Brie", "Rind 101"]

    def test_empty_request(self) -> None:
        assert build_feed(FeedRequest()) == []


class TestCheeseDisplayName:
    """Tests for cheese_display_name."""

    def test_named_producer_uses_full_name(self) -> None:
        cheese = FeedCheese(
            id="1",
            full_name="Montgomery's Cheddar",
            cheese_type_name="Cheddar",
            producer_name="Montgomery",
        )

        assert cheese_display_name(cheese) == "Montgomery's Cheddar"

    def test_generic_and_unknown_producers_use_type(self) -> None:
        for producer in ("Generic", "Unknown Dairy"):
            cheese = FeedCheese(
                id="1", full_name="X Feta", cheese_type_name="Feta", producer_name=producer
            )
            assert cheese_display_name(cheese) == "Feta"

    def test_fallbacks(self) -> None:
        assert cheese_display_name(FeedCheese(id="1", cheese_type_name="Gouda")) == "Gouda"
        assert cheese_display_name(FeedCheese(id="1")) == ""
