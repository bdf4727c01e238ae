"""Domain layer DI providers."""

from dishka import Scope, provide

from authinfo.domain.service import AuthInfoService
from authinfo.util.di.base import ProviderBase
from authinfo.util.ids import IdGenerator
from authinfo.util.password import PasswordHasher


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped, each unit of work gets a fresh
    service instance.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_id_generator(self) -> IdGenerator:
        """Provide random record identifier generator."""
        return IdGenerator()

    @provide
    def get_auth_info_service(
        self, id_generator: IdGenerator, hasher: PasswordHasher
    ) -> AuthInfoService:
        """Provide auth record domain service."""
        return AuthInfoService(id_generator=id_generator, hasher=hasher)
