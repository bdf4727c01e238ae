"""Domain model entities for auth records."""

from authinfo.domain.model.auth_info import AuthInfo

__all__ = [
    "AuthInfo",
]
