"""Domain services."""

from .auth_info_service import AuthInfoService

__all__ = [
    "AuthInfoService",
]
