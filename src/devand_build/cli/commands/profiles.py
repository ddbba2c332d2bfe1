"""Profiles command implementation."""

import typer

from ..output.display import display_profiles
from ..state import CLIState


def profiles(ctx: typer.Context) -> None:
    """List the profile of every environment for the selected target."""
    state: CLIState = ctx.obj
    display_profiles(state.create_builder().table)
