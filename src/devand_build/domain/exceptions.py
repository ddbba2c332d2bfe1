"""Custom exceptions for devand-build."""


class DevandBuildError(Exception):
    """Base exception for devand-build errors."""

    pass


class ConfigurationError(DevandBuildError):
    """Raised when a build configuration cannot be resolved.

    This occurs when a mode selector does not name a known environment, or
    when a profile table does not cover every environment.
    """

    def __init__(self, message: str, *, selector: object = None) -> None:
        self.selector = selector
        super().__init__(message)
