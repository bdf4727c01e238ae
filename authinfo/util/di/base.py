"""Provider base shared by every authinfo DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Components a test container may swap for a mock
Component = Literal["hashing"]


class ProviderBase(Provider):
    """dishka provider tagged for prod/mock selection.

    A provider class with no subclasses is concrete and always used. A
    provider class with subclasses is a mockable component: ``get_provider``
    picks the subclass whose ``__is_mock__`` matches the request, e.g.
    bcrypt at the configured cost in production and at the lowest cost in
    tests.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
