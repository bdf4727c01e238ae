"""Auth record entity.

Holds the credentials of one user: a random identifier, an optional
bcrypt password hash, the token watermark and linked provider data.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from authinfo.domain.error import ValidationError
from authinfo.domain.model.common import DomainModel
from authinfo.domain.value import AuthInfoId, ProviderInfo, ProviderInfoData
from authinfo.util.ids import IdGenerator
from authinfo.util.password import DEFAULT_HASHER, PasswordHasher

_default_id_generator = IdGenerator()


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class AuthInfo(DomainModel):
    """Authentication record.

    Three kinds of record exist, one constructor each:
    - password-based: ``AuthInfo.new(password)``
    - anonymous: ``AuthInfo.new_anonymous()``
    - provider-linked: ``AuthInfo.new_with_provider_info(key, data)``

    The record is mutated in place by password changes and provider-info
    updates. Callers own the instance; it is not safe to mutate one record
    from several threads.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    id: AuthInfoId = Field(default_factory=_default_id_generator, frozen=True)
    hashed_password: bytes = b""
    # Tokens issued before this instant are no longer accepted
    token_valid_since: Optional[datetime] = None
    provider_info: ProviderInfo = Field(default_factory=dict)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Validate the identifier is not empty."""
        if not v:
            raise ValueError("AuthInfo id must not be empty")
        return v

    @field_validator("token_valid_since")
    @classmethod
    def normalize_token_valid_since(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store the watermark in UTC, reading naive values as UTC."""
        return None if v is None else _as_utc(v)

    @classmethod
    def new(
        cls,
        password: str,
        *,
        id_generator: IdGenerator | None = None,
        hasher: PasswordHasher | None = None,
    ) -> "AuthInfo":
        """Create a password-based record.

        The watermark stays unset: no token can predate the record.

        Args:
            password: Plaintext password, must not be empty
            id_generator: Identifier source (random UUID4 by default)
            hasher: Password hasher (bcrypt, default cost, by default)

        Returns:
            New record holding the password hash

        Raises:
            ValidationError: If the password is empty or too long
            PasswordHashingError: If hashing fails
        """
        if not password:
            raise ValidationError("Password must not be empty")

        hashed = (hasher or DEFAULT_HASHER).hash(password)
        return cls(
            id=(id_generator or _default_id_generator)(),
            hashed_password=hashed,
        )

    @classmethod
    def new_anonymous(cls, *, id_generator: IdGenerator | None = None) -> "AuthInfo":
        """Create a record with no password and no linked provider."""
        return cls(id=(id_generator or _default_id_generator)())

    @classmethod
    def new_with_provider_info(
        cls,
        key: str,
        data: ProviderInfoData,
        *,
        id_generator: IdGenerator | None = None,
    ) -> "AuthInfo":
        """Create a record linked to an external identity provider.

        Args:
            key: Provider key, e.g. "com.example:johndoe"
            data: Provider payload
            id_generator: Identifier source (random UUID4 by default)

        Returns:
            New record without password
        """
        return cls(
            id=(id_generator or _default_id_generator)(),
            provider_info={key: data},
        )

    @property
    def is_anonymous(self) -> bool:
        """True if the record has neither a password nor a linked provider."""
        return not self.hashed_password and not self.provider_info

    def set_password(self, password: str, hasher: PasswordHasher | None = None) -> None:
        """Hash and store a new password, invalidating earlier tokens.

        The record is left untouched if hashing fails.

        Args:
            password: Plaintext password
            hasher: Password hasher (bcrypt, default cost, by default)

        Raises:
            ValidationError: If the password is too long for bcrypt
            PasswordHashingError: If hashing fails
        """
        hashed = (hasher or DEFAULT_HASHER).hash(password)

        now = datetime.now(timezone.utc)
        # Watermark must move forward even if the clock did not
        if self.token_valid_since is not None and now <= self.token_valid_since:
            now = self.token_valid_since + timedelta(microseconds=1)

        self.hashed_password = hashed
        self.token_valid_since = now

    def is_same_password(
        self, password: str, hasher: PasswordHasher | None = None
    ) -> bool:
        """Check a plaintext password against the stored hash.

        Returns False for records without a password.
        """
        return (hasher or DEFAULT_HASHER).verify(self.hashed_password, password)

    def is_token_valid(self, issued_at: datetime) -> bool:
        """Check a session token's issue time against the watermark.

        Args:
            issued_at: Issue time of the token, naive values are read as UTC

        Returns:
            True if no watermark is set or the token was issued at or after it
        """
        if self.token_valid_since is None:
            return True
        return _as_utc(issued_at) >= self.token_valid_since

    def set_provider_info_data(self, key: str, data: ProviderInfoData) -> None:
        """Store the payload for a provider key, replacing any existing one."""
        self.provider_info[key] = data

    def get_provider_info_data(self, key: str) -> ProviderInfoData | None:
        """Return the payload for a provider key, or None if not linked."""
        return self.provider_info.get(key)

    def remove_provider_info_data(self, key: str) -> None:
        """Unlink a provider key. Unknown keys are ignored."""
        self.provider_info.pop(key, None)
