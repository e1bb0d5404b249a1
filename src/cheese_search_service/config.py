"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from cheese_search_service.feed.interleaver import FeedPattern
from cheese_search_service.search.fuzzy_matcher import FuzzyThresholds


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_v1_prefix: str = "/api/v1"
    cors_origins: str = "http://localhost:8081,http://localhost:19006"
    cors_allow_all: bool = False

    # App
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = False
    app_name: str = "Cheese Search Service"
    app_version: str = "0.1.0"

    # Search
    search_max_candidates: int = 200  # Candidates scored per request (fuzzy scan has no index)
    search_default_limit: int = 20
    search_max_limit: int = 100
    search_discovery_limit: int = 20  # Shuffled items returned when no query is given
    search_suggestion_threshold: float = 0.4  # Minimum title similarity for "did you mean"
    search_suggestion_limit: int = 3

    # Fuzzy matching thresholds (empirically tuned, keep in sync with FuzzyThresholds)
    fuzzy_short_pattern_length: int = 3  # Patterns this short only match word prefixes
    fuzzy_prefix_exact_length: int = 5  # Patterns up to this length allow 1 prefix edit
    fuzzy_prefix_distance_ratio: float = 0.25
    fuzzy_word_distance_ratio: float = 0.3
    fuzzy_max_length_difference: int = 3

    # Feed interleaving pattern
    feed_primary_before_editorial: int = 3
    feed_editorial_per_round: int = 1
    feed_primary_before_sponsored: int = 3
    feed_sponsored_per_round: int = 1

    @property
    def fuzzy_thresholds(self) -> FuzzyThresholds:
        """Build matcher thresholds from settings."""
        return FuzzyThresholds(
            short_pattern_length=self.fuzzy_short_pattern_length,
            prefix_exact_length=self.fuzzy_prefix_exact_length,
            prefix_distance_ratio=self.fuzzy_prefix_distance_ratio,
            word_distance_ratio=self.fuzzy_word_distance_ratio,
            max_length_difference=self.fuzzy_max_length_difference,
        )

    @property
    def feed_pattern(self) -> FeedPattern:
        """Build the feed take-pattern from settings."""
        return FeedPattern(
            primary_before_editorial=self.feed_primary_before_editorial,
            editorial_per_round=self.feed_editorial_per_round,
            primary_before_sponsored=self.feed_primary_before_sponsored,
            sponsored_per_round=self.feed_sponsored_per_round,
        )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string.

        Returns:
            List of allowed origins, or ["*"] if cors_allow_all is True.
        """
        if self.cors_allow_all:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
