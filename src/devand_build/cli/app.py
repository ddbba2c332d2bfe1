"""CLI application factory."""

from pathlib import Path
from typing import Optional

import typer

from ..config.settings import LogLevel, Settings, build_settings
from ..domain.environment import DeploymentTarget
from ..infrastructure.logging import setup_logging
from .commands.features import features
from .commands.profiles import profiles
from .commands.resolve import resolve
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None, state: CLIState | None = None
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional CLIState override for testing (takes precedence)

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="devand-build",
        help="Resolve devand UI bundler configuration for a build environment",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        target: Optional[DeploymentTarget] = typer.Option(
            None,
            "--target",
            "-t",
            envvar="DEVAND_BUILD_TARGET",
            help="Deployment target the bundle is built for",
        ),
        ui_root: Optional[Path] = typer.Option(
            None,
            "--ui-root",
            envvar="DEVAND_BUILD_UI_ROOT",
            help="Root of the UI crate (defaults to the current directory)",
        ),
        host: Optional[str] = typer.Option(
            None,
            "--host",
            envvar="DEVAND_BUILD_HOST",
            help="Dev server bind host",
        ),
        port: Optional[int] = typer.Option(
            None,
            "--port",
            "-p",
            envvar="DEVAND_BUILD_PORT",
            help="Dev server port",
            min=1,
            max=65535,
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
        json_logs: bool = typer.Option(
            False,
            "--json-logs",
            help="Write log records as JSON lines",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            ctx.obj = state
            return

        if settings is not None:
            resolved_settings = settings
        else:
            resolved_settings = build_settings(
                target=target,
                ui_root=ui_root,
                dev_server_host=host,
                dev_server_port=port,
                log_level=LogLevel.DEBUG if verbose else None,
                json_logs=json_logs or None,
            )

        setup_logging(resolved_settings)
        ctx.obj = CLIState(resolved_settings)

    app.command()(resolve)
    app.command()(features)
    app.command()(profiles)

    return app
