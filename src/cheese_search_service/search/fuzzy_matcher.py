"""Typo-tolerant matching of a query pattern against a field value.

Match Rules (checked in order, first hit wins):
1. Exact substring: case-insensitive ``pattern in candidate``
2. Short patterns (<= 3 chars): some word of the candidate starts with the
   pattern. No edit-distance tolerance, so "br" never matches "gr".
3. Per word of the candidate:
   - exact word equality
   - prefix: the word's first len(pattern) chars are within 1 edit
     (patterns up to 5 chars) or ceil(25% of len(pattern)) edits
   - whole word: only for words within 3 chars of the pattern's length,
     at most ceil(30% of len(pattern)) edits

Known Limitation:
- Distances count code points, not graphemes. "é" written as "e" plus a
  combining accent is two characters.
- Case folding uses str.lower on the whole string, so the rare characters
  whose lower-case form is longer (e.g. "İ") shift lengths by one.
"""

import math
from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein


@dataclass(frozen=True)
class FuzzyThresholds:
    """Edit-distance tolerances for fuzzy_match.

    The defaults are the tuned production values; override through
    Settings rather than editing them here.
    """

    short_pattern_length: int = 3
    prefix_exact_length: int = 5
    prefix_distance_ratio: float = 0.25
    word_distance_ratio: float = 0.3
    max_length_difference: int = 3


DEFAULT_THRESHOLDS = FuzzyThresholds()


def levenshtein_distance(a: str, b: str) -> int:
    """Case-insensitive unit-cost edit distance between two strings."""
    return Levenshtein.distance(a or "", b or "", processor=str.lower)


def calculate_similarity(a: str | None, b: str | None) -> float:
    """Similarity in [0, 1]: 1 - distance / length of the longer string.

    Returns 0.0 when either side is empty.
    """
    if not a or not b:
        return 0.0
    return Levenshtein.normalized_similarity(a, b, processor=str.lower)


def _max_prefix_distance(pattern_length: int, thresholds: FuzzyThresholds) -> int:
    if pattern_length <= thresholds.prefix_exact_length:
        return 1
    return math.ceil(pattern_length * thresholds.prefix_distance_ratio)


def _word_matches(word: str, pattern: str, thresholds: FuzzyThresholds) -> bool:
    if word == pattern:
        return True

    prefix = word[: len(pattern)]
    if levenshtein_distance(prefix, pattern) <= _max_prefix_distance(len(pattern), thresholds):
        return True

    if abs(len(word) - len(pattern)) <= thresholds.max_length_difference:
        max_distance = math.ceil(len(pattern) * thresholds.word_distance_ratio)
        if levenshtein_distance(word, pattern) <= max_distance:
            return True

    return False


def fuzzy_match(
    candidate: str | None,
    pattern: str | None,
    thresholds: FuzzyThresholds = DEFAULT_THRESHOLDS,
) -> bool:
    """Decide whether a field value matches a query pattern.

    Args:
        candidate: Field value to search in (e.g. a cheese name)
        pattern: Single expanded query term
        thresholds: Edit-distance tolerances

    Returns:
        True if any rule accepts the pair. Empty or missing input never
        matches.

    Examples:
        >>> fuzzy_match("Camembert cheese", "camembert")
        True
        >>> fuzzy_match("Brie", "br")
        True
        >>> fuzzy_match("Camembert", "camam")
        True
        >>> fuzzy_match("Gouda", "xy")
        False
    """
    if not candidate or not pattern:
        return False

    candidate_lower = candidate.lower()
    pattern_lower = pattern.lower()

    if pattern_lower in candidate_lower:
        return True

    words = candidate_lower.split()

    if len(pattern_lower) <= thresholds.short_pattern_length:
        return any(word.startswith(pattern_lower) for word in words)

    return any(_word_matches(word, pattern_lower, thresholds) for word in words)
