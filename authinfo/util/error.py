"""Errors raised while wiring the package (settings and DI container)."""

from typing import Any


class UtilError(Exception):
    """Failure outside the auth record domain itself."""


class ConfigurationError(UtilError):
    """Settings could not be loaded, e.g. a bcrypt cost outside 4..31."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None):
        self.errors = errors or []
        super().__init__(message)


class DependencyInjectionError(UtilError):
    """No provider implementation exists for a mockable component."""

    def __init__(self, component: str, kind: str):
        self.component = component
        self.kind = kind
        super().__init__(f"No {kind} implementation for {component}")
