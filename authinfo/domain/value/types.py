"""Value objects for authentication data."""

from typing import Any

from pydantic import Field

from authinfo.domain.value.common import RootValueObject

# Arbitrary JSON-like payload stored for one linked provider
ProviderInfoData = dict[str, Any]

# Provider key -> payload
ProviderInfo = dict[str, ProviderInfoData]

USERNAME_KEY = "username"
EMAIL_KEY = "email"


class AuthData(RootValueObject[dict[str, Any]]):
    """Login fields supplied by a caller trying to authenticate.

    Never persisted. Validated before any credential lookup:

        AuthData({"username": "johndoe"}).is_valid()       # True
        AuthData({"iamyourfather": "johndoe"}).is_valid()  # False
        AuthData({"username": None}).is_empty()            # True
    """

    root: dict[str, Any] = Field(default_factory=dict)

    @property
    def username(self) -> Any | None:
        """Username supplied by the caller, if any."""
        return self.root.get(USERNAME_KEY)

    @property
    def email(self) -> Any | None:
        """Email supplied by the caller, if any."""
        return self.root.get(EMAIL_KEY)

    def is_valid(self) -> bool:
        """Check that a username or an email is present and non-null.

        Unknown keys are tolerated but never make the data valid on
        their own.
        """
        return self.username is not None or self.email is not None

    def is_empty(self) -> bool:
        """Check whether the caller supplied no non-null value at all."""
        return all(value is None for value in self.root.values())
