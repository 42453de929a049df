"""Centralized configuration for search-server using Pydantic Settings."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from SEARCH_SERVER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Index settings
    stop_words: str = Field(default="", description="Space separated words excluded from indexing and queries")
    max_result_document_count: int = Field(default=5, ge=1, description="Maximum documents returned per search")
    relevance_tolerance: float = Field(
        default=1e-6,
        gt=0.0,
        description="Relevance gap under which documents are ordered by rating instead",
    )

    # Request queue settings
    request_window_size: int = Field(
        default=1440,
        ge=1,
        description="Number of most recent requests tracked for the no-result count (one per minute of a day)",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @model_validator(mode="after")
    def _check_stop_words(self) -> "Settings":
        if any(ord(char) < 0x20 for char in self.stop_words):
            raise ValueError("SEARCH_SERVER_STOP_WORDS must not contain control characters")
        return self

    def get_stop_words(self) -> list[str]:
        """Get list of configured stop words (space separated)."""
        if not self.stop_words:
            return []
        return [word for word in self.stop_words.split(" ") if word]
