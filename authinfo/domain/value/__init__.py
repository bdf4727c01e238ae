"""Domain value objects for auth records."""

from authinfo.domain.value.identifiers import AuthInfoId
from authinfo.domain.value.types import (
    EMAIL_KEY,
    USERNAME_KEY,
    AuthData,
    ProviderInfo,
    ProviderInfoData,
)

__all__ = [
    # Identifiers
    "AuthInfoId",
    # Types
    "AuthData",
    "ProviderInfo",
    "ProviderInfoData",
    "USERNAME_KEY",
    "EMAIL_KEY",
]
