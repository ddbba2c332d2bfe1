"""Tests for logging infrastructure."""

import io
import json

from devand_build.config.settings import LogLevel, Settings
from devand_build.infrastructure.logging import (
    configure_logger,
    get_logger,
    reset_logging,
    setup_logging,
)


def test_get_logger_auto_configures():
    """Test that get_logger auto-configures with defaults."""
    reset_logging()

    logger = get_logger(__name__)

    assert logger is not None
    logger.info("Test message")


def test_get_logger_with_explicit_setup():
    """Test get_logger after explicit setup_logging call."""
    settings = Settings(log_level=LogLevel.CRITICAL)
    setup_logging(settings)

    logger = get_logger(__name__)
    logger.critical("Test critical message")


def test_configure_logger_respects_level():
    """Records below the configured level are dropped."""
    sink = io.StringIO()
    configure_logger(level=LogLevel.WARNING, sink=sink)

    logger = get_logger("devand_build.tests")
    logger.info("hidden")
    logger.warning("shown")

    output = sink.getvalue()
    assert "hidden" not in output
    assert "shown" in output
    assert "devand_build.tests" in output


def test_configure_logger_serialized():
    """serialize=True emits one JSON record per line."""
    sink = io.StringIO()
    configure_logger(level=LogLevel.DEBUG, serialize=True, sink=sink)

    get_logger("devand_build.tests").debug("structured")

    record = json.loads(sink.getvalue().splitlines()[0])
    assert record["record"]["message"] == "structured"
    assert record["record"]["extra"]["name"] == "devand_build.tests"


def test_reset_logging():
    """Test that reset_logging cleans up configuration."""
    configure_logger()
    _ = get_logger(__name__)

    reset_logging()

    logger2 = get_logger("other_module")
    assert logger2 is not None
