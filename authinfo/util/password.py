"""Password hashing utilities (bcrypt)."""

import bcrypt

from authinfo.domain.error import PasswordHashingError, ValidationError
from authinfo.util.logging import get_logger

logger = get_logger(__name__)

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72

# Same work factor as golang.org/x/crypto/bcrypt.DefaultCost
DEFAULT_ROUNDS = 10


class PasswordHasher:
    """Salted, deliberately slow password hashing backed by bcrypt."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        """Initialize hasher.

        Args:
            rounds: bcrypt work factor
        """
        self.rounds = rounds

    def hash(self, password: str) -> bytes:
        """Hash a plaintext password with a fresh salt.

        Args:
            password: Plaintext password

        Returns:
            bcrypt hash (modular crypt format, ASCII bytes)

        Raises:
            ValidationError: If the password is longer than bcrypt accepts
            PasswordHashingError: If bcrypt fails, e.g. invalid rounds
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )

        try:
            return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds))
        except ValueError as e:
            raise PasswordHashingError(str(e)) from e

    def verify(self, hashed_password: bytes, password: str) -> bool:
        """Check a plaintext password against a stored hash.

        Comparison is constant-time (done inside bcrypt).

        Args:
            hashed_password: Stored bcrypt hash, may be empty
            password: Plaintext password to check

        Returns:
            True if the password matches, False otherwise
        """
        if not hashed_password:
            return False

        encoded = password.encode("utf-8")
        # Never hashed, and bcrypt 4 would match on the first 72 bytes only
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False

        try:
            return bcrypt.checkpw(encoded, hashed_password)
        except ValueError as e:
            logger.warning(f"Stored password hash is malformed: {e}")
            return False


DEFAULT_HASHER = PasswordHasher()
