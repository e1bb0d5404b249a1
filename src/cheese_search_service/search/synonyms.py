"""Cheese synonym dictionary and query term expansion.

Maps a raw query term to the set of spellings that should be treated as
equivalent, including common misspellings ("mozarella", "chedder").

Lookup Policy: first match wins
- Groups are scanned in dictionary order
- A group matches when the term equals a member, contains a member, or is
  contained in a member
- Only the first matching group contributes synonyms; a term that could
  belong to two groups only receives the earlier one's members

Usage:
    from cheese_search_service.search.synonyms import expand_term

    expand_term("Mozarella")
    # {"mozarella", "mozzarella", "mozzerella", "mozza", "mozerella"}
"""

from collections.abc import Mapping

# Ordered: iteration order decides which group wins for ambiguous terms
CHEESE_SYNONYMS: dict[str, tuple[str, ...]] = {
    "cheddar": ("cheddar", "cheder", "cheedar", "chedar", "chedder"),
    "mozzarella": ("mozzarella", "mozarella", "mozzerella", "mozza", "mozerella"),
    "parmesan": ("parmesan", "parmigiano", "reggiano", "parm", "parmasean"),
    "brie": ("brie", "bree", "bri"),
    "feta": ("feta", "fetta", "feeta"),
    "camembert": ("camembert", "camembear", "camember", "camambert", "camenbert"),
    "gouda": ("gouda", "guda", "gooda"),
    "gruyere": ("gruyere", "gruyère", "gruyer", "gruyear"),
    "ricotta": ("ricotta", "ricota"),
    "provolone": ("provolone", "provoloni", "provelone"),
    "emmental": ("emmental", "emmenthal", "emmenthaler", "swiss"),
    "manchego": ("manchego", "manchago"),
    "gorgonzola": ("gorgonzola", "gorganzola"),
    "stilton": ("stilton", "stiliton"),
    "roquefort": ("roquefort", "rocquefort", "roquefor"),
    "havarti": ("havarti", "havarthi"),
    "goat": ("goat", "goats", "chèvre", "chevre"),
    "blue": ("blue", "bleu"),
    "sheep": ("sheep", "sheeps", "pecorino"),
}


def normalize_term(term: str | None) -> str:
    """Lower-case and trim a query term. Idempotent."""
    if not term:
        return ""
    return term.strip().lower()


def _group_matches(term: str, members: tuple[str, ...]) -> bool:
    return any(member == term or member in term or term in member for member in members)


def find_synonym_group(
    term: str | None,
    synonyms: Mapping[str, tuple[str, ...]] = CHEESE_SYNONYMS,
) -> str | None:
    """Return the key of the first synonym group matching the term.

    Args:
        term: Raw or normalized query term
        synonyms: Ordered synonym table

    Returns:
        Group key, or None if no group matches (or the term is empty)
    """
    normalized = normalize_term(term)
    if not normalized:
        return None

    for key, members in synonyms.items():
        if _group_matches(normalized, members):
            return key
    return None


def expand_term(
    term: str | None,
    synonyms: Mapping[str, tuple[str, ...]] = CHEESE_SYNONYMS,
) -> set[str]:
    """Expand a query term with the members of its synonym group.

    Args:
        term: Raw query term (normalized here)
        synonyms: Ordered synonym table

    Returns:
        Set containing the normalized term plus every member of the first
        matching group. Empty set for an empty term.

    Examples:
        >>> sorted(expand_term("goat"))
        ['chevre', 'chèvre', 'goat', 'goats']

        >>> expand_term("comté")
        {'comté'}
    """
    normalized = normalize_term(term)
    if not normalized:
        return set()

    expanded = {normalized}
    key = find_synonym_group(normalized, synonyms)
    if key is not None:
        expanded.update(synonyms[key])
    return expanded
