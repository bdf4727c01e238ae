"""Test configuration and fixtures."""

import pytest

from authinfo.util.password import PasswordHasher
from tests.di.hashing import TEST_ROUNDS
from tests.harness import SequentialIdGenerator


@pytest.fixture
def hasher() -> PasswordHasher:
    """Low-cost bcrypt hasher."""
    return PasswordHasher(rounds=TEST_ROUNDS)


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    """Deterministic identifier generator."""
    return SequentialIdGenerator()
