"""Auth record domain service."""

from datetime import datetime

import logfire

from authinfo.domain.model.auth_info import AuthInfo
from authinfo.domain.value import AuthData, ProviderInfoData
from authinfo.util.ids import IdGenerator
from authinfo.util.password import PasswordHasher


class AuthInfoService:
    """Domain service for auth record operations.

    Binds records to the configured identifier generator and password
    hasher, and traces every operation. Hashing is CPU-bound and slow by
    design: keep ``create_with_password``, ``change_password`` and
    ``verify_password`` off latency-sensitive paths.
    """

    def __init__(self, id_generator: IdGenerator, hasher: PasswordHasher) -> None:
        """Initialize auth record service.

        Args:
            id_generator: Identifier source for new records
            hasher: Password hasher
        """
        self.id_generator = id_generator
        self.hasher = hasher

    def create_with_password(self, password: str) -> AuthInfo:
        """Create a password-based record.

        Args:
            password: Plaintext password

        Returns:
            New record

        Raises:
            ValidationError: If the password is empty or too long
            PasswordHashingError: If hashing fails
        """
        with logfire.span("auth_info_service.create_with_password"):
            try:
                info = AuthInfo.new(
                    password, id_generator=self.id_generator, hasher=self.hasher
                )
            except Exception as e:
                logfire.error(
                    "Auth record creation failed",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            logfire.info("Auth record created", auth_info_id=info.id, kind="password")
            return info

    def create_anonymous(self) -> AuthInfo:
        """Create an anonymous record."""
        with logfire.span("auth_info_service.create_anonymous"):
            info = AuthInfo.new_anonymous(id_generator=self.id_generator)
            logfire.info("Auth record created", auth_info_id=info.id, kind="anonymous")
            return info

    def create_with_provider_info(self, key: str, data: ProviderInfoData) -> AuthInfo:
        """Create a record linked to an external provider.

        Args:
            key: Provider key
            data: Provider payload

        Returns:
            New record
        """
        with logfire.span("auth_info_service.create_with_provider_info", provider_key=key):
            info = AuthInfo.new_with_provider_info(
                key, data, id_generator=self.id_generator
            )
            logfire.info(
                "Auth record created",
                auth_info_id=info.id,
                kind="provider",
                provider_key=key,
            )
            return info

    def change_password(self, info: AuthInfo, password: str) -> AuthInfo:
        """Set a new password, invalidating tokens issued before now.

        Args:
            info: Record to update in place
            password: New plaintext password

        Returns:
            The same record

        Raises:
            ValidationError: If the password is too long
            PasswordHashingError: If hashing fails
        """
        with logfire.span("auth_info_service.change_password", auth_info_id=info.id):
            try:
                info.set_password(password, hasher=self.hasher)
            except Exception as e:
                logfire.error(
                    "Password change failed",
                    auth_info_id=info.id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            logfire.info(
                "Password changed",
                auth_info_id=info.id,
                token_valid_since=info.token_valid_since.isoformat(),
            )
            return info

    def verify_password(self, info: AuthInfo, password: str) -> bool:
        """Check a plaintext password against the record.

        Args:
            info: Record to check
            password: Plaintext password

        Returns:
            True if the password matches
        """
        with logfire.span("auth_info_service.verify_password", auth_info_id=info.id):
            matched = info.is_same_password(password, hasher=self.hasher)
            if matched:
                logfire.info("Password verified", auth_info_id=info.id)
            else:
                logfire.warn("Password mismatch", auth_info_id=info.id)
            return matched

    def is_token_valid(self, info: AuthInfo, issued_at: datetime) -> bool:
        """Check whether a token issued at ``issued_at`` is still accepted."""
        with logfire.span("auth_info_service.is_token_valid", auth_info_id=info.id):
            valid = info.is_token_valid(issued_at)
            if not valid:
                logfire.info(
                    "Token predates password change",
                    auth_info_id=info.id,
                    issued_at=issued_at.isoformat(),
                )
            return valid

    def link_provider(self, info: AuthInfo, key: str, data: ProviderInfoData) -> AuthInfo:
        """Link (or relink) an external provider to the record."""
        with logfire.span(
            "auth_info_service.link_provider", auth_info_id=info.id, provider_key=key
        ):
            replaced = info.get_provider_info_data(key) is not None
            info.set_provider_info_data(key, data)
            logfire.info(
                "Provider linked",
                auth_info_id=info.id,
                provider_key=key,
                replaced=replaced,
            )
            return info

    def get_provider_data(self, info: AuthInfo, key: str) -> ProviderInfoData | None:
        """Get the payload stored for a provider key.

        Args:
            info: Record to read
            key: Provider key

        Returns:
            Payload if linked, None otherwise
        """
        with logfire.span(
            "auth_info_service.get_provider_data", auth_info_id=info.id, provider_key=key
        ):
            data = info.get_provider_info_data(key)
            if data is None:
                logfire.warn(
                    "Provider not linked", auth_info_id=info.id, provider_key=key
                )
            return data

    def unlink_provider(self, info: AuthInfo, key: str) -> AuthInfo:
        """Remove a provider link. Unknown keys are a no-op."""
        with logfire.span(
            "auth_info_service.unlink_provider", auth_info_id=info.id, provider_key=key
        ):
            existed = info.get_provider_info_data(key) is not None
            info.remove_provider_info_data(key)
            logfire.info(
                "Provider unlinked",
                auth_info_id=info.id,
                provider_key=key,
                existed=existed,
            )
            return info

    def validate_auth_data(self, auth_data: AuthData) -> bool:
        """Check caller-supplied login fields before credential lookup.

        Args:
            auth_data: Login fields

        Returns:
            True if a username or email was supplied
        """
        with logfire.span("auth_info_service.validate_auth_data"):
            valid = auth_data.is_valid()
            logfire.info(
                "Auth data checked",
                valid=valid,
                empty=auth_data.is_empty(),
                fields=sorted(auth_data.root.keys()),
            )
            return valid
