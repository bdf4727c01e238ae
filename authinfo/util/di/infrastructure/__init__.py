"""Infrastructure DI providers."""

from authinfo.util.di.infrastructure.hashing import HashingProvider, ProdHashingProvider

__all__ = [
    "HashingProvider",
    "ProdHashingProvider",
]
