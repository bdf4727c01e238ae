"""Process bootstrap: logging, observability and the DI container."""

import logfire
from dishka import Container

from authinfo.config import Settings
from authinfo.util.di.container import create_container
from authinfo.util.logging import setup_logging
from authinfo.util.observability import configure_logfire


def init_runtime() -> Container:
    """Configure logging and Logfire, then build the DI container.

    Settings are loaded from environment variables by the container, the
    same instance drives logging setup.

    Returns:
        Production DI container
    """
    container = create_container()
    settings = container.get(Settings)

    # Logfire must be configured before anything emits spans
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info("Runtime initialized", environment=settings.environment)
    return container
