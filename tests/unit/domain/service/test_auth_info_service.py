"""Unit tests for AuthInfoService."""

from datetime import datetime, timedelta, timezone

import pytest

from authinfo.domain.error import PasswordHashingError, ValidationError
from authinfo.domain.service import AuthInfoService
from authinfo.domain.value import AuthData
from authinfo.util.ids import IdGenerator
from authinfo.util.password import PasswordHasher
from tests.di.hashing import TEST_ROUNDS
from tests.harness import SequentialIdGenerator, create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

PROVIDER_KEY = "com.example:johndoe"


class TestWiring:
    """Tests for the service as served by the container."""

    def test_service_uses_mock_hasher(self, unit_env):
        """Unit container should serve the low-cost hasher."""
        service = unit_env.get(AuthInfoService)

        assert service.hasher.rounds == TEST_ROUNDS
        assert unit_env.get(PasswordHasher) is service.hasher
        assert isinstance(service.id_generator, IdGenerator)


class TestCreate:
    """Tests for record creation."""

    def test_create_with_password(self, unit_env):
        """Should hash the password with the configured hasher."""
        service = unit_env.get(AuthInfoService)

        info = service.create_with_password("secret")

        assert info.id
        assert service.verify_password(info, "secret")
        assert not service.verify_password(info, "secretx")

    def test_create_with_empty_password_fails(self, unit_env):
        """Empty passwords are rejected."""
        service = unit_env.get(AuthInfoService)

        with pytest.raises(ValidationError):
            service.create_with_password("")

    def test_create_with_broken_hasher_fails(self, id_generator):
        """Hashing failure aborts creation."""
        service = AuthInfoService(
            id_generator=id_generator, hasher=PasswordHasher(rounds=3)
        )

        with pytest.raises(PasswordHashingError):
            service.create_with_password("secret")

    def test_create_anonymous(self, unit_env):
        """Anonymous records carry no credentials."""
        service = unit_env.get(AuthInfoService)

        info = service.create_anonymous()

        assert info.id
        assert info.is_anonymous
        assert not service.verify_password(info, "")

    def test_create_with_provider_info(self, unit_env):
        """Provider records carry the payload."""
        service = unit_env.get(AuthInfoService)

        info = service.create_with_provider_info(PROVIDER_KEY, {"hello": "world"})

        assert service.get_provider_data(info, PROVIDER_KEY) == {"hello": "world"}
        assert info.hashed_password == b""

    def test_ids_come_from_generator(self, hasher):
        """Every constructor draws from the injected generator."""
        service = AuthInfoService(
            id_generator=SequentialIdGenerator("user"), hasher=hasher
        )

        ids = [
            service.create_with_password("secret").id,
            service.create_anonymous().id,
            service.create_with_provider_info(PROVIDER_KEY, {}).id,
        ]

        assert ids == ["user-1", "user-2", "user-3"]


class TestChangePassword:
    """Tests for change_password."""

    def test_change_password_invalidates_old_tokens(self, unit_env):
        """Tokens issued before the change are rejected."""
        service = unit_env.get(AuthInfoService)
        info = service.create_with_password("old-secret")

        service.change_password(info, "new-secret")

        assert service.verify_password(info, "new-secret")
        assert not service.verify_password(info, "old-secret")
        watermark = info.token_valid_since
        assert not service.is_token_valid(info, watermark - timedelta(minutes=5))
        assert service.is_token_valid(info, watermark)

    def test_change_password_too_long(self, unit_env):
        """Overlong passwords propagate as validation errors."""
        service = unit_env.get(AuthInfoService)
        info = service.create_anonymous()

        with pytest.raises(ValidationError):
            service.change_password(info, "x" * 100)

        assert info.token_valid_since is None


class TestProviderLinks:
    """Tests for provider link management."""

    def test_link_get_unlink(self, unit_env):
        """Full lifecycle through the service."""
        service = unit_env.get(AuthInfoService)
        info = service.create_anonymous()

        service.link_provider(info, PROVIDER_KEY, {"hello": "world"})
        assert service.get_provider_data(info, PROVIDER_KEY) == {"hello": "world"}

        service.unlink_provider(info, PROVIDER_KEY)
        assert service.get_provider_data(info, PROVIDER_KEY) is None

    def test_relink_overwrites(self, unit_env):
        """Linking an already linked key replaces its payload."""
        service = unit_env.get(AuthInfoService)
        info = service.create_with_provider_info(PROVIDER_KEY, {"v": 1})

        service.link_provider(info, PROVIDER_KEY, {"v": 2})

        assert info.provider_info == {PROVIDER_KEY: {"v": 2}}

    def test_unlink_unknown_is_noop(self, unit_env):
        """Unlinking a key that was never linked does nothing."""
        service = unit_env.get(AuthInfoService)
        info = service.create_with_provider_info(PROVIDER_KEY, {"v": 1})

        service.unlink_provider(info, "com.example:janedoe")

        assert info.provider_info == {PROVIDER_KEY: {"v": 1}}


class TestValidateAuthData:
    """Tests for validate_auth_data."""

    def test_validate_auth_data(self, unit_env):
        """Delegates to AuthData.is_valid."""
        service = unit_env.get(AuthInfoService)

        assert service.validate_auth_data(AuthData({"username": "johndoe"}))
        assert not service.validate_auth_data(AuthData({"username": None}))
        assert not service.validate_auth_data(AuthData({"iamyourfather": "johndoe"}))


class TestTracing:
    """Tests for emitted spans."""

    def test_change_password_is_traced_without_secrets(self, capfire, hasher):
        """Spans are emitted and never carry the plaintext or the hash."""
        service = AuthInfoService(id_generator=IdGenerator(), hasher=hasher)
        info = service.create_with_password("hunter22")

        service.change_password(info, "hunter23")

        spans = capfire.exporter.exported_spans_as_dict()
        names = {span["name"] for span in spans}
        assert "auth_info_service.create_with_password" in names
        assert "auth_info_service.change_password" in names

        rendered = repr(spans)
        assert "hunter22" not in rendered
        assert "hunter23" not in rendered
        assert info.hashed_password.decode() not in rendered

    def test_lookups_are_traced(self, capfire, hasher):
        """Token checks, provider reads and auth data checks each get a span."""
        service = AuthInfoService(id_generator=IdGenerator(), hasher=hasher)
        info = service.create_with_provider_info(PROVIDER_KEY, {"hello": "world"})

        service.is_token_valid(info, datetime.now(timezone.utc))
        service.get_provider_data(info, "com.example:janedoe")
        service.validate_auth_data(AuthData({"username": "johndoe"}))

        names = {span["name"] for span in capfire.exporter.exported_spans_as_dict()}
        assert "auth_info_service.is_token_valid" in names
        assert "auth_info_service.get_provider_data" in names
        assert "auth_info_service.validate_auth_data" in names
