"""Centralized configuration for the weapon search client using Pydantic Settings."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Values are validated at construction. The search core takes these as plain
    constructor arguments, so a ``Settings`` instance is only needed by the
    session shell and the HTTP lookup client.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Lookup service
    weapon_api_url: str = Field(
        default="http://localhost:8080/api", description="Base URL of the weapon lookup API"
    )
    http_timeout: int = Field(default=10, ge=1, description="HTTP request timeout in seconds")

    # Suggestion behaviour
    search_debounce_ms: int = Field(default=300, ge=0, description="Settle delay before a lookup is issued")
    min_query_length: int = Field(default=2, ge=1, description="Shortest trimmed query that triggers a lookup")
    max_suggestions: int = Field(default=10, ge=1, description="Maximum number of suggestions displayed")

    # Weapon card
    stat_max_value: int = Field(default=100, ge=1, description="Stat value rendered as a full bar")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @model_validator(mode="after")
    def _check_api_url(self) -> "Settings":
        if not self.weapon_api_url.strip():
            raise ValueError("WEAPON_API_URL must not be blank")
        return self

    def debounce_seconds(self) -> float:
        """Get the debounce delay in seconds."""
        return self.search_debounce_ms / 1000

    def search_endpoint(self) -> str:
        """Get the full URL of the search endpoint.

        Returns:
            Base URL without trailing slash, followed by ``/search``
        """
        return self.weapon_api_url.strip().rstrip("/") + "/search"
