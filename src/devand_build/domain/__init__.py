"""Domain layer - environments, profiles, resolved configuration and exceptions."""

from .environment import DeploymentTarget, EnvironmentName, resolve_environment
from .exceptions import ConfigurationError, DevandBuildError
from .features import render
from .profile import Profile
from .resolved import (
    CopyInstruction,
    DevServer,
    ModuleRule,
    OutputSettings,
    ResolvedConfiguration,
    WasmPackInvocation,
)

__all__ = [
    # Environments
    "DeploymentTarget",
    "EnvironmentName",
    "resolve_environment",
    # Profiles
    "Profile",
    "render",
    # Resolved configuration
    "CopyInstruction",
    "DevServer",
    "ModuleRule",
    "OutputSettings",
    "ResolvedConfiguration",
    "WasmPackInvocation",
    # Exceptions
    "ConfigurationError",
    "DevandBuildError",
]
