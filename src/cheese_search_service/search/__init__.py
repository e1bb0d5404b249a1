"""Synonym-aware fuzzy search over the cheese catalog."""

from .fuzzy_matcher import (
    DEFAULT_THRESHOLDS,
    FuzzyThresholds,
    calculate_similarity,
    fuzzy_match,
    levenshtein_distance,
)
from .relevance_scorer import (
    FIELD_WEIGHTS,
    ScoredRecord,
    SearchEngine,
    SearchOutcome,
    discover,
    rank_records,
    score_record,
    suggest,
)
from .synonyms import CHEESE_SYNONYMS, expand_term, find_synonym_group, normalize_term

__all__ = [
    "CHEESE_SYNONYMS",
    "DEFAULT_THRESHOLDS",
    "FIELD_WEIGHTS",
    "FuzzyThresholds",
    "ScoredRecord",
    "SearchEngine",
    "SearchOutcome",
    "calculate_similarity",
    "discover",
    "expand_term",
    "find_synonym_group",
    "fuzzy_match",
    "levenshtein_distance",
    "normalize_term",
    "rank_records",
    "score_record",
    "suggest",
]
