"""Output helpers for CLI commands."""

from pathlib import Path

import typer

from ...domain.exceptions import ConfigurationError
from ...domain.features import render
from ...profiles.table import ProfileTable


def display_configuration_error(error: ConfigurationError) -> None:
    """Display a configuration error in red on stderr."""
    typer.secho(f"✗ {error}", fg=typer.colors.RED, err=True)


def display_write_error(path: Path, error: OSError) -> None:
    """Display a failure to write a configuration file in red on stderr."""
    typer.secho(f"✗ Could not write {path}: {error}", fg=typer.colors.RED, err=True)


def display_written(path: Path) -> None:
    """Display where a configuration file was written."""
    typer.secho(f"✓ Wrote configuration: {path}", fg=typer.colors.GREEN)


def display_profiles(table: ProfileTable) -> None:
    """Display every environment profile in the table.

    Args:
        table: Profile table for the selected deployment target
    """
    for name, profile in table:
        typer.secho(name.value, bold=True)
        typer.echo(f"  output:   {profile.output_dir}")
        typer.echo(f"  public:   {profile.public_path!r}")
        typer.echo(f"  entry:    {profile.entry}")
        typer.echo(f"  features: {render(profile.features) or '-'}")
        if profile.history_fallback:
            typer.echo(f"  fallback: {profile.history_fallback}")
