"""Per-environment build profile model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profile(BaseModel):
    """Immutable build settings selected by an environment name.

    Output directories are deployment-specific constants and must be
    absolute by the time a Profile is constructed.
    """

    model_config = ConfigDict(frozen=True)

    output_dir: Path = Field(description="Absolute directory the bundle is written to")
    public_path: str = Field(
        default="",
        description="Public URL prefix the bundle is served under (may be empty)",
    )
    features: tuple[str, ...] = Field(
        default=(),
        description="Ordered cargo feature flags passed to the wasm compiler",
    )
    entry: str = Field(min_length=1, description="Entry module of the bundle")
    history_fallback: str | None = Field(
        default=None,
        description="Index path served for unknown routes by the dev server",
    )

    @field_validator("output_dir")
    @classmethod
    def _require_absolute(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"output_dir must be absolute, got {value}")
        return value

    @field_validator("history_fallback")
    @classmethod
    def _empty_fallback_is_none(cls, value: str | None) -> str | None:
        return value or None
