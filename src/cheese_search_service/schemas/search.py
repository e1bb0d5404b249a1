"""Search request and response schemas.

These schemas define the API contract for the catalog search endpoint.
Callers post the candidate pool they fetched from storage; the service
scores, filters and ranks it.
"""

from enum import Enum

from pydantic import BaseModel, Field


class SearchMode(str, Enum):
    """Which slice of the catalog a search covers.

    Values:
        ALL: Every record kind
        CHEESE: Cheeses, producer cheeses and cheese types
        PAIRING: Food and drink pairings
        ARTICLE: Cheezopedia articles and recipes
    """

    ALL = "all"
    CHEESE = "cheese"
    PAIRING = "pairing"
    ARTICLE = "article"


class RecordKind(str, Enum):
    """Discriminator for heterogeneous catalog records."""

    CHEESE = "cheese"
    PRODUCER_CHEESE = "producer_cheese"
    CHEESE_TYPE = "cheese_type"
    ARTICLE = "article"
    RECIPE = "recipe"
    PAIRING = "pairing"
    USER = "user"


MODE_KINDS: dict[SearchMode, frozenset[RecordKind]] = {
    SearchMode.CHEESE: frozenset(
        {RecordKind.CHEESE, RecordKind.PRODUCER_CHEESE, RecordKind.CHEESE_TYPE}
    ),
    SearchMode.PAIRING: frozenset({RecordKind.PAIRING}),
    SearchMode.ARTICLE: frozenset({RecordKind.ARTICLE, RecordKind.RECIPE}),
}


class SearchableRecord(BaseModel):
    """Read-only snapshot of one catalog entry.

    Every text field is optional; missing fields contribute nothing to the
    relevance score. Flavor and aroma accept either a single string or a
    list of descriptors.
    """

    id: str = Field(..., min_length=1, description="Record identifier")
    kind: RecordKind = Field(..., description="Record kind")
    title: str | None = Field(default=None, description="Name or title")
    description: str | None = None
    category: str | None = Field(default=None, description="Category name (e.g. 'Soft')")
    sub_category: str | None = None
    cheese_type: str | None = Field(default=None, description="Cheese type name")
    origin: str | None = Field(default=None, description="Origin country or region")
    producer: str | None = Field(default=None, description="Producer name")
    flavor: str | list[str] | None = Field(default=None, description="Flavor descriptors")
    aroma: str | list[str] | None = Field(default=None, description="Aroma descriptors")


class SearchRequest(BaseModel):
    """Search request parameters.

    An empty or whitespace-only query switches to discovery mode: the pool
    is returned shuffled instead of scored.

    Examples:
        >>> request = SearchRequest(
        ...     query="goat",
        ...     records=[SearchableRecord(id="3", kind="cheese", title="Chevre log")],
        ... )
    """

    query: str | None = Field(
        default=None,
        max_length=200,
        description="Free-text query; empty for discovery mode",
        examples=["camembert"],
    )
    records: list[SearchableRecord] = Field(
        default_factory=list,
        description="Candidate pool fetched from storage",
    )
    mode: SearchMode = Field(
        default=SearchMode.ALL,
        description="Catalog slice to search",
    )
    limit: int | None = Field(
        default=None,
        ge=1,
        le=100,
        description="Maximum number of results (defaults to service setting)",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the discovery shuffle (reproducible ordering)",
    )


class SearchResult(BaseModel):
    """One ranked record."""

    id: str = Field(..., description="Record identifier")
    kind: RecordKind = Field(..., description="Record kind")
    score: int = Field(..., ge=0, description="Weighted relevance score (0 in discovery mode)")
    title: str | None = Field(default=None, description="Record title")


class SearchResponse(BaseModel):
    """Search response with ranked results and metadata.

    - discovery: True when no query was given and results are shuffled
    - suggestions: "Did you mean" records offered when nothing matched
    """

    query: str | None = Field(default=None, description="Original search query")
    results: list[SearchResult] = Field(default_factory=list, description="Ranked results")
    suggestions: list[SearchResult] = Field(
        default_factory=list,
        description="Close titles offered when the query matched nothing",
    )
    discovery: bool = Field(default=False, description="Whether discovery mode was used")
    total_candidates: int = Field(..., ge=0, description="Candidates considered")
    timing_ms: int = Field(..., ge=0, description="Search execution time in milliseconds")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "query": "goat",
                    "results": [
                        {"id": "3", "kind": "cheese", "score": 10, "title": "Chevre log"}
                    ],
                    "suggestions": [],
                    "discovery": False,
                    "total_candidates": 3,
                    "timing_ms": 1,
                }
            ]
        }
    }
