"""Weighted relevance scoring and ranking of catalog records.

Each expanded query term is fuzzy-matched against every populated field of
a record. A match adds the field's weight to the record's score, so a
record matching "goat" in both its title and its cheese type outranks one
matching only in its description.

Scoring:
    score = Σ_terms Σ_fields weight(field) * fuzzy_match(field_value, term)

Ranking:
- Records scoring 0 are dropped, never returned with a zero score
- Survivors are sorted by descending score; ties keep input order
  (Python's sort is stable, which this module relies on)

Discovery Mode:
- With no query the scorer is skipped entirely and the pool is shuffled
- The random source is injectable so tests can seed it

Performance:
- O(records × terms × fields × words × pattern²) because every word is
  edit-distance compared. Callers cap the pool (search_max_candidates).
"""

import random
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from cheese_search_service.logging_config import get_logger
from cheese_search_service.schemas.search import (
    MODE_KINDS,
    SearchableRecord,
    SearchMode,
)

from .fuzzy_matcher import DEFAULT_THRESHOLDS, FuzzyThresholds, calculate_similarity, fuzzy_match
from .synonyms import CHEESE_SYNONYMS, expand_term, find_synonym_group, normalize_term

logger = get_logger(__name__)

# Field importance multipliers. Relative order is the contract:
# title > type/category/flavor > aroma > description > producer > origin
FIELD_WEIGHTS: dict[str, int] = {
    "title": 10,
    "cheese_type": 9,
    "category": 8,
    "flavor": 8,
    "aroma": 7,
    "description": 5,
    "sub_category": 5,
    "producer": 4,
    "origin": 3,
}

MIN_SUGGESTION_QUERY_LENGTH = 3


@dataclass
class ScoredRecord:
    """A record paired with its relevance score for one query."""

    record: SearchableRecord
    score: int


@dataclass
class SearchOutcome:
    """Everything the presentation layer needs from one search call."""

    query: str
    results: list[ScoredRecord] = field(default_factory=list)
    suggestions: list[ScoredRecord] = field(default_factory=list)
    discovery: bool = False
    total_candidates: int = 0


def field_text(record: SearchableRecord, name: str) -> str | None:
    """Return a field's searchable text, joining descriptor lists."""
    value = getattr(record, name, None)
    if isinstance(value, list):
        value = " ".join(part for part in value if part)
    return value or None


def score_record(
    record: SearchableRecord,
    expanded_terms: Iterable[str],
    weights: Mapping[str, int] = FIELD_WEIGHTS,
    thresholds: FuzzyThresholds = DEFAULT_THRESHOLDS,
) -> int:
    """Sum field weights over every (term, field) pair that fuzzy-matches.

    Args:
        record: Catalog record (missing fields are skipped)
        expanded_terms: Synonym-expanded query terms
        weights: Field name -> weight
        thresholds: Fuzzy matcher tolerances

    Returns:
        Non-negative integer score; 0 means no match anywhere
    """
    fields: list[tuple[str, int]] = []
    for name, weight in weights.items():
        text = field_text(record, name)
        if text is not None:
            fields.append((text, weight))

    total = 0
    for term in expanded_terms:
        for text, weight in fields:
            if fuzzy_match(text, term, thresholds):
                total += weight
    return total


def rank_records(
    records: Iterable[SearchableRecord],
    expanded_terms: Iterable[str],
    weights: Mapping[str, int] = FIELD_WEIGHTS,
    thresholds: FuzzyThresholds = DEFAULT_THRESHOLDS,
) -> list[ScoredRecord]:
    """Score records, drop non-matches and sort by descending score.

    Ties keep the order in which records were supplied.
    """
    terms = list(expanded_terms)
    scored: list[ScoredRecord] = []
    for record in records:
        score = score_record(record, terms, weights, thresholds)
        if score > 0:
            scored.append(ScoredRecord(record=record, score=score))

    # Stable sort: equal scores keep input order
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored


def discover(
    records: Sequence[SearchableRecord],
    rng: random.Random | None = None,
    limit: int | None = None,
) -> list[SearchableRecord]:
    """Return a shuffled copy of the pool for browsing without a query.

    Args:
        records: Candidate pool (not mutated)
        rng: Random source; a fresh unseeded Random if None
        limit: Optional cap on returned records

    Returns:
        Shuffled records, at most ``limit`` of them
    """
    shuffled = list(records)
    (rng or random.Random()).shuffle(shuffled)
    if limit is not None:
        shuffled = shuffled[:limit]
    return shuffled


def suggest(
    query: str,
    records: Iterable[SearchableRecord],
    threshold: float = 0.4,
    limit: int = 3,
) -> list[ScoredRecord]:
    """Find "did you mean" records whose title is close to the query.

    Only used after a search matched nothing. Titles must be more similar
    than ``threshold``; best matches first, ties in input order.
    """
    candidates = [
        (calculate_similarity(query, record.title), record)
        for record in records
        if record.title
    ]
    close = [pair for pair in candidates if pair[0] > threshold]
    close.sort(key=lambda pair: pair[0], reverse=True)
    return [ScoredRecord(record=record, score=0) for _, record in close[:limit]]


def filter_by_mode(
    records: Iterable[SearchableRecord], mode: SearchMode
) -> list[SearchableRecord]:
    """Keep only the record kinds covered by the search mode."""
    kinds = MODE_KINDS.get(mode)
    if kinds is None:
        return list(records)
    return [record for record in records if record.kind in kinds]


class SearchEngine:
    """Search orchestrator: expand, score, rank, or fall back to discovery.

    Holds only read-only configuration, so one instance is safely shared
    across concurrent requests.

    Usage:
        engine = SearchEngine()
        outcome = engine.search("goat", records)
        [(s.record.id, s.score) for s in outcome.results]
    """

    def __init__(
        self,
        weights: Mapping[str, int] = FIELD_WEIGHTS,
        thresholds: FuzzyThresholds = DEFAULT_THRESHOLDS,
        synonyms: Mapping[str, tuple[str, ...]] = CHEESE_SYNONYMS,
        max_candidates: int = 200,
        default_limit: int = 20,
        discovery_limit: int = 20,
        suggestion_threshold: float = 0.4,
        suggestion_limit: int = 3,
    ) -> None:
        self.weights = dict(weights)
        self.thresholds = thresholds
        self.synonyms = synonyms
        self.max_candidates = max_candidates
        self.default_limit = default_limit
        self.discovery_limit = discovery_limit
        self.suggestion_threshold = suggestion_threshold
        self.suggestion_limit = suggestion_limit

    def search(
        self,
        query: str | None,
        records: Sequence[SearchableRecord],
        mode: SearchMode = SearchMode.ALL,
        limit: int | None = None,
        rng: random.Random | None = None,
    ) -> SearchOutcome:
        """Search the candidate pool.

        Args:
            query: Raw user query; empty or None selects discovery mode
            records: Candidate pool from storage (treated as the full pool)
            mode: Catalog slice to search
            limit: Maximum results (top-N)
            rng: Random source for discovery mode

        Returns:
            SearchOutcome with ranked results, or shuffled results in
            discovery mode. Never raises for well-typed input; an empty pool
            gives an empty outcome.
        """
        normalized = normalize_term(query)
        pool = filter_by_mode(records, mode)

        if len(pool) > self.max_candidates:
            logger.warning(
                "search.candidates_truncated",
                received=len(pool),
                max_candidates=self.max_candidates,
            )
            pool = pool[: self.max_candidates]

        if not normalized:
            shuffled = discover(pool, rng=rng, limit=limit or self.discovery_limit)
            logger.info("search.discovery", candidates=len(pool), results=len(shuffled))
            return SearchOutcome(
                query="",
                results=[ScoredRecord(record=record, score=0) for record in shuffled],
                discovery=True,
                total_candidates=len(pool),
            )

        terms = expand_term(normalized, self.synonyms)
        ranked = rank_records(pool, terms, self.weights, self.thresholds)
        results = ranked[: limit or self.default_limit]

        suggestions: list[ScoredRecord] = []
        if not results and len(normalized) >= MIN_SUGGESTION_QUERY_LENGTH:
            suggestions = suggest(
                normalized,
                pool,
                threshold=self.suggestion_threshold,
                limit=self.suggestion_limit,
            )

        logger.info(
            "search.completed",
            query=normalized[:100],
            synonym_group=find_synonym_group(normalized, self.synonyms),
            terms=len(terms),
            candidates=len(pool),
            matched=len(ranked),
            results=len(results),
            suggestions=len(suggestions),
        )

        return SearchOutcome(
            query=normalized,
            results=results,
            suggestions=suggestions,
            discovery=False,
            total_candidates=len(pool),
        )
