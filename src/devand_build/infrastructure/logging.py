"""Logging setup built on loguru.

Modules obtain loggers through ``get_logger``; the first call configures
loguru with defaults unless ``setup_logging`` or ``configure_logger`` ran
first.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_TEXT_FORMAT: t.Final = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.INFO,
    serialize: bool = False,
    sink: t.Any = None,
) -> None:
    """Replace loguru's handlers with a single configured sink.

    Args:
        level: Minimum level to emit
        serialize: Emit JSON lines instead of coloured text
        sink: Anything loguru accepts as a sink (stderr when None)
    """
    global _configured

    logger.remove()
    logger.configure(extra={"name": "devand_build"})
    logger.add(
        sink if sink is not None else sys.stderr,
        level=str(level),
        format=_TEXT_FORMAT,
        serialize=serialize,
        colorize=False if serialize else None,
        backtrace=False,
        diagnose=False,
    )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, serialize=settings.json_logs)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults if needed."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def reset_logging() -> None:
    """Remove all handlers so the next get_logger call reconfigures."""
    global _configured

    logger.remove()
    _configured = False
