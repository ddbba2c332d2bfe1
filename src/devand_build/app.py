from dataclasses import dataclass

from .builder import ConfigurationBuilder, create_builder
from .config.settings import Settings
from .infrastructure.logging import get_logger, setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds the settings and the builder configured from them, so callers
    and tests only pass explicit `Settings`.
    """

    settings: Settings
    builder: ConfigurationBuilder


def create_app(settings: Settings | None = None) -> App:
    """Create an `App` with provided settings or defaults.

    Configures logging from the settings before wiring the builder.
    """
    settings = settings or Settings()
    setup_logging(settings)
    builder = create_builder(
        settings.target,
        settings.ui_root,
        host=settings.dev_server_host,
        port=settings.dev_server_port,
        logger=get_logger("devand_build.builder"),
    )
    return App(settings=settings, builder=builder)
