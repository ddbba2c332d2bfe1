"""Runtime configuration."""

from .settings import LogLevel, Settings, build_settings

__all__ = ["LogLevel", "Settings", "build_settings"]
