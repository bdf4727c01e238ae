"""Password hashing providers."""

from dishka import Scope, provide

from authinfo.config import HashingSettings
from authinfo.util.di.base import ProviderBase
from authinfo.util.password import PasswordHasher


class HashingProvider(ProviderBase):
    """Hashing component base."""

    __mock_component__ = "hashing"


class ProdHashingProvider(HashingProvider):
    """Production hashing provider using the configured bcrypt cost."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_password_hasher(
        self, hashing_settings: HashingSettings
    ) -> PasswordHasher:
        """Provide bcrypt password hasher."""
        return PasswordHasher(rounds=hashing_settings.bcrypt_rounds)
