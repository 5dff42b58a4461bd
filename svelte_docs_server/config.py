"""Configuration for the Svelte docs MCP server.

All values can be overridden with ``SVELTE_DOCS_*`` environment variables
or a local ``.env`` file.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="SVELTE_DOCS_",
        env_file=".env",
        extra="ignore",
    )

    # ============ DOCUMENT SOURCE ============
    docs_url: str = "https://svelte.dev/llms-small.txt"
    fetch_timeout_seconds: float = Field(default=10.0, gt=0)
    fetch_max_attempts: int = Field(default=3, ge=1)
    fetch_retry_delay_seconds: float = Field(default=2.0, ge=0)
    refresh_interval_seconds: float = Field(default=0.0, ge=0)

    # ============ SEARCH / RESOURCES ============
    search_result_limit: int = Field(default=3, ge=1, le=20)
    resource_scheme: str = "svelte"

    # ============ SERVER ============
    transport: Literal["stdio", "http"] = "stdio"
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"
    cors_allowed_origins: str = "*"

    @property
    def cors_origins_list(self) -> list[str]:
        """Comma-separated CORS origins as a list."""
        return [origin.strip() for origin in self.cors_allowed_origins.split(",") if origin.strip()]


settings = Settings()
