"""Library configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from equatable.domain.types import ComparisonMode
from equatable.util.error import ConfigurationError


class ComparisonSettings(BaseModel):
    """Structural comparison configuration."""

    # Default for classes that do not pin their own comparison_mode
    # deep: recurse into nested groupings and value objects
    # flat: natural equality per element only
    mode: ComparisonMode = ComparisonMode.DEEP


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via EQUATABLE_OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Library settings.

    Values are read from the environment (or a local .env file) using the
    EQUATABLE_ prefix:

        EQUATABLE_ENVIRONMENT=development
        EQUATABLE_DEBUG=true
        EQUATABLE_COMPARISON__MODE=flat
    """

    model_config = SettingsConfigDict(
        env_prefix="EQUATABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows COMPARISON__MODE syntax
        extra="ignore",
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    comparison: ComparisonSettings = ComparisonSettings()
    observability: ObservabilitySettings = ObservabilitySettings()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process.

    Returns:
        Cached settings instance

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid equatable configuration: {e}") from e
