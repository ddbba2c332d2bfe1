"""devand-build - build-profile resolver for the devand UI bundle."""

from .app import App, create_app
from .builder import ConfigurationBuilder, build_configuration, create_builder
from .config.settings import LogLevel, Settings
from .domain import (
    ConfigurationError,
    DeploymentTarget,
    DevandBuildError,
    EnvironmentName,
    Profile,
    ResolvedConfiguration,
    render,
)
from .profiles import ProfileTable

__all__ = [
    "App",
    "create_app",
    "ConfigurationBuilder",
    "build_configuration",
    "create_builder",
    "ProfileTable",
    "LogLevel",
    "Settings",
    "ConfigurationError",
    "DevandBuildError",
    "DeploymentTarget",
    "EnvironmentName",
    "Profile",
    "ResolvedConfiguration",
    "render",
]
