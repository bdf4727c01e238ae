"""Record identifier generation."""

from uuid import uuid4

from authinfo.domain.value import AuthInfoId


class IdGenerator:
    """Generates random auth record identifiers.

    Records take a generator instead of calling ``uuid4`` directly so
    tests can substitute a deterministic sequence.
    """

    def __call__(self) -> AuthInfoId:
        """Return a fresh UUID4-based identifier."""
        return AuthInfoId(str(uuid4()))
