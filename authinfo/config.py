"""Application configuration."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HashingSettings(BaseModel):
    """Password hashing configuration."""

    # bcrypt work factor (log2 of the number of rounds)
    # Each increment doubles the cost of hashing and verifying
    # bcrypt itself only accepts 4..31
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested values use ``__``:

        ENVIRONMENT=production
        HASHING__BCRYPT_ROUNDS=12
        OBSERVABILITY__LOGFIRE_TOKEN=...
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows HASHING__BCRYPT_ROUNDS syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Nested settings
    hashing: HashingSettings = HashingSettings()
    observability: ObservabilitySettings = ObservabilitySettings()
