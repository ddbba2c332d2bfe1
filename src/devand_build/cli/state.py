"""CLI state container."""

import typing as t

from ..builder import ConfigurationBuilder, create_builder
from ..config.settings import Settings

BuilderFactory = t.Callable[..., ConfigurationBuilder]


class CLIState:
    """Application state container for CLI commands.

    Holds Settings and the factory commands use to obtain a builder, so
    tests can swap in a mocked builder.
    """

    def __init__(
        self, settings: Settings, builder_factory: BuilderFactory = create_builder
    ):
        self.settings = settings
        self._builder_factory = builder_factory

    def create_builder(self) -> ConfigurationBuilder:
        """Create a builder for the configured target and UI root."""
        return self._builder_factory(
            self.settings.target,
            self.settings.ui_root,
            host=self.settings.dev_server_host,
            port=self.settings.dev_server_port,
        )
