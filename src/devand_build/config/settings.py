import enum
import typing as t
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..domain.environment import DeploymentTarget
from ..domain.resolved import DEFAULT_DEV_SERVER_HOST, DEFAULT_DEV_SERVER_PORT


class LogLevel(enum.StrEnum):
    """Log levels understood by the logging infrastructure."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseModel):
    """Runtime settings for the resolver and its CLI.

    The build environment itself is not a setting: it is chosen per
    invocation by the mode selector.
    """

    model_config = ConfigDict(frozen=True)

    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = Field(
        default=False,
        description="Emit log records as JSON lines instead of text",
    )
    target: DeploymentTarget = DeploymentTarget.WEB
    ui_root: Path = Field(
        default_factory=Path.cwd,
        description="Root of the UI crate; profile paths are relative to it",
    )
    dev_server_host: str = DEFAULT_DEV_SERVER_HOST
    dev_server_port: int = Field(default=DEFAULT_DEV_SERVER_PORT, ge=1, le=65535)


def build_settings(**overrides: t.Any) -> Settings:
    """Create Settings, ignoring overrides that are None.

    Lets CLI options that were not given fall back to the defaults.
    """
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
