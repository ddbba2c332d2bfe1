"""Resolve command implementation."""

import json
from pathlib import Path
from typing import Optional

import typer

from ...domain.exceptions import ConfigurationError
from ..output.display import (
    display_configuration_error,
    display_write_error,
    display_written,
)
from ..state import CLIState


def resolve(
    ctx: typer.Context,
    mode: str = typer.Argument(
        ..., help="Build environment (development or production)"
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the configuration to this file"
    ),
) -> None:
    """Resolve the bundler configuration for MODE as JSON.

    Examples:
        devand-build resolve development
        devand-build --target demo resolve production -o webpack.resolved.json
    """
    state: CLIState = ctx.obj

    try:
        configuration = state.create_builder().build(mode)
    except ConfigurationError as e:
        display_configuration_error(e)
        raise typer.Exit(code=1)

    rendered = json.dumps(configuration.to_webpack(), indent=2)
    if output is None:
        typer.echo(rendered)
        return

    try:
        output.write_text(rendered + "\n", encoding="utf-8")
    except OSError as e:
        display_write_error(output, e)
        raise typer.Exit(code=1)
    display_written(output)
