"""Single-shot assembly of the bundler configuration."""

import typing as t
from pathlib import Path

from ..domain.environment import (
    DeploymentTarget,
    EnvironmentName,
    resolve_environment,
)
from ..domain.exceptions import ConfigurationError
from ..domain.features import render
from ..domain.resolved import (
    DEFAULT_DEV_SERVER_HOST,
    DEFAULT_DEV_SERVER_PORT,
    STATIC_ASSETS_DIR,
    STYLESHEET_LOADERS,
    STYLESHEET_PATTERN,
    CopyInstruction,
    DevServer,
    ModuleRule,
    OutputSettings,
    ResolvedConfiguration,
    WasmPackInvocation,
)
from ..infrastructure.logging import get_logger
from ..profiles.table import ProfileTable

if t.TYPE_CHECKING:
    import loguru

_STYLESHEET_RULE: t.Final = ModuleRule(
    test=STYLESHEET_PATTERN, flags="i", use=STYLESHEET_LOADERS
)


class ConfigurationBuilder:
    """Builds a ResolvedConfiguration from a mode selector.

    The builder holds no per-call state: each ``build`` call is independent
    and returns equal results for equal selectors.
    """

    def __init__(
        self,
        table: ProfileTable,
        *,
        host: str = DEFAULT_DEV_SERVER_HOST,
        port: int = DEFAULT_DEV_SERVER_PORT,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialize the builder.

        Args:
            table: Profile table for the deployment target being built
            host: Dev server bind host
            port: Dev server port
            logger: Logger for recording resolution
        """
        self.table = table
        self.host = host
        self.port = port
        self._logger = logger

    def build(
        self,
        mode_selector: EnvironmentName | str,
        env: t.Mapping[str, str] | None = None,
    ) -> ResolvedConfiguration:
        """Resolve ``mode_selector`` into a complete configuration.

        Args:
            mode_selector: Environment name chosen by the invoking command
            env: Ambient environment map, accepted for pass-through and
                not consulted

        Returns:
            The assembled, immutable configuration

        Raises:
            ConfigurationError: If the selector names no known environment
        """
        try:
            name = resolve_environment(mode_selector)
        except ConfigurationError:
            self._logger.warning(f"Unknown build mode: {mode_selector!r}")
            raise

        profile = self.table.lookup(name)
        feature_args = render(profile.features)
        self._logger.debug(
            f"Resolved {name} profile: output={profile.output_dir} "
            f"features={feature_args or '(none)'}"
        )

        return ResolvedConfiguration(
            environment=name,
            entry=profile.entry,
            output=OutputSettings(
                path=profile.output_dir, public_path=profile.public_path
            ),
            module_rules=(_STYLESHEET_RULE,),
            copy_instructions=(
                CopyInstruction(
                    source=STATIC_ASSETS_DIR, destination=profile.output_dir
                ),
            ),
            wasm_pack=WasmPackInvocation(feature_args=feature_args),
            watch=name is EnvironmentName.DEVELOPMENT,
            dev_server=DevServer(
                content_base=profile.output_dir,
                host=self.host,
                port=self.port,
                compress=name is EnvironmentName.PRODUCTION,
                history_fallback=profile.history_fallback,
            ),
        )


def create_builder(
    target: DeploymentTarget | str,
    ui_root: Path | str,
    *,
    host: str = DEFAULT_DEV_SERVER_HOST,
    port: int = DEFAULT_DEV_SERVER_PORT,
    logger: "loguru.Logger" = get_logger(__name__),
) -> ConfigurationBuilder:
    """Create a builder for one deployment target.

    Raises:
        ConfigurationError: If the target is unknown
    """
    table = ProfileTable.for_target(target, ui_root)
    return ConfigurationBuilder(table, host=host, port=port, logger=logger)


def build_configuration(
    mode_selector: EnvironmentName | str,
    target: DeploymentTarget | str = DeploymentTarget.WEB,
    ui_root: Path | str = ".",
    env: t.Mapping[str, str] | None = None,
) -> ResolvedConfiguration:
    """One-shot helper: create a builder and build a single configuration."""
    return create_builder(target, ui_root).build(mode_selector, env)
