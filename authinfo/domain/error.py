"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class PasswordHashingError(DomainError):
    """Raised when the password hashing primitive fails.

    The operation that needed the hash is aborted, so a record never ends
    up holding an unhashed or empty secret.
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Password hashing failed: {reason}")
