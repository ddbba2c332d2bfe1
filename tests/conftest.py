"""Pytest configuration and fixtures for devand-build tests."""

import loguru
import pytest
from typer.testing import CliRunner

from devand_build.builder import ConfigurationBuilder, create_builder
from devand_build.cli.app import create_cli_app
from devand_build.config.settings import LogLevel, Settings
from devand_build.domain import DeploymentTarget
from devand_build.infrastructure.logging import reset_logging
from devand_build.profiles import ProfileTable


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    return mocker.Mock(spec=loguru.logger)


@pytest.fixture
def ui_root(tmp_path):
    """Provide an absolute UI crate root inside a workspace directory."""
    root = tmp_path / "devand-ui"
    root.mkdir()
    return root


@pytest.fixture
def test_settings(ui_root):
    """Provide test-specific settings."""
    return Settings(log_level=LogLevel.CRITICAL, ui_root=ui_root)


@pytest.fixture
def web_table(ui_root) -> ProfileTable:
    """Profile table for the embedded web-server target."""
    return ProfileTable.for_target(DeploymentTarget.WEB, ui_root)


@pytest.fixture
def demo_table(ui_root) -> ProfileTable:
    """Profile table for the standalone demo target."""
    return ProfileTable.for_target(DeploymentTarget.DEMO, ui_root)


@pytest.fixture
def builder(ui_root, mock_logger) -> ConfigurationBuilder:
    """Provide a web-target builder with a mocked logger."""
    return create_builder(DeploymentTarget.WEB, ui_root, logger=mock_logger)


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
