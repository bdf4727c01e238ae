"""Mock providers for testing."""

from .hashing import MockHashingProvider
from .container import build_test_container

__all__ = [
    "MockHashingProvider",
    "build_test_container",
]
