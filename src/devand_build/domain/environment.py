"""Build environment and deployment target enumerations."""

import enum

from .exceptions import ConfigurationError


class EnvironmentName(enum.StrEnum):
    """Build environments a profile can be selected for."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class DeploymentTarget(enum.StrEnum):
    """Where the built UI is deployed.

    WEB embeds the bundle in the companion web server's static directory.
    DEMO builds a standalone demo site in the crate-local ``dist`` directory.
    """

    WEB = "web"
    DEMO = "demo"


def resolve_environment(selector: EnvironmentName | str) -> EnvironmentName:
    """Resolve a mode selector to an EnvironmentName.

    Args:
        selector: Enum member or its exact string value (e.g. "production")

    Returns:
        The matching EnvironmentName

    Raises:
        ConfigurationError: If the selector names no known environment
    """
    try:
        return EnvironmentName(selector)
    except ValueError:
        known = ", ".join(name.value for name in EnvironmentName)
        raise ConfigurationError(
            f"unknown environment: {selector!r} (expected one of: {known})",
            selector=selector,
        ) from None
