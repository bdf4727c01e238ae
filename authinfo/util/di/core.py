"""Core DI providers (non-mockable)."""

import pydantic
from dishka import Scope, provide

from authinfo.config import HashingSettings, Settings
from authinfo.util.di.base import ProviderBase
from authinfo.util.error import ConfigurationError


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        try:
            return Settings()
        except pydantic.ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings: {e}", errors=e.errors()
            ) from e

    @provide(scope=Scope.APP)
    def provide_hashing_settings(self, settings: Settings) -> HashingSettings:
        """Provide password hashing settings."""
        return settings.hashing
