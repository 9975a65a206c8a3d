"""Configuration settings for the samira client."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    # Riot API Configuration
    riot_api_key: str = Field(default="")
    riot_platform: str = Field(default="na1")
    riot_region: str = Field(default="americas")

    # HTTP Configuration (milliseconds)
    request_timeout_ms: int = Field(default=10000, gt=0)
    request_retries: int = Field(default=3, ge=0)
    request_retry_delay_ms: int = Field(default=1000, ge=0)

    # Logging Configuration
    log_level: str = Field(default="INFO")

    @field_validator("riot_platform", "riot_region")
    @classmethod
    def normalize_routing_value(cls, v: str) -> str:
        """Routing values are lower-case host prefixes (e.g. ``euw1``)."""
        return v.strip().lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix for environment variables
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()


# Create a global settings instance lazily
settings: Settings | None = None


def get_global_settings() -> Settings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
