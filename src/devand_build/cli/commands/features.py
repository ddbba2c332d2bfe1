"""Features command implementation."""

import typer

from ...domain.exceptions import ConfigurationError
from ..output.display import display_configuration_error
from ..state import CLIState


def features(
    ctx: typer.Context,
    mode: str = typer.Argument(
        ..., help="Build environment (development or production)"
    ),
) -> None:
    """Print the compiler feature arguments for MODE."""
    state: CLIState = ctx.obj

    try:
        configuration = state.create_builder().build(mode)
    except ConfigurationError as e:
        display_configuration_error(e)
        raise typer.Exit(code=1)

    typer.echo(configuration.wasm_pack.feature_args)
