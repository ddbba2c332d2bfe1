"""Shared fixtures for CLI tests."""

import pytest

from devand_build.builder import ConfigurationBuilder
from devand_build.cli.app import create_cli_app
from devand_build.cli.state import CLIState
from devand_build.domain import ConfigurationError


@pytest.fixture
def test_app(test_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=test_settings)


@pytest.fixture
def mock_builder(mocker, web_table):
    """Provide a mocked ConfigurationBuilder with spec for type safety."""
    mock = mocker.Mock(spec=ConfigurationBuilder)
    mock.table = web_table
    mock.build.side_effect = ConfigurationError("unknown environment: 'x'")
    return mock


@pytest.fixture
def cli_state_with_mock_builder(test_settings, mock_builder):
    """CLIState that returns the mocked builder."""

    def mock_builder_factory(*args, **kwargs):
        return mock_builder

    return CLIState(test_settings, builder_factory=mock_builder_factory)


@pytest.fixture
def app_with_mock_builder(cli_state_with_mock_builder):
    """CLI app with mocked builder factory for testing."""
    return create_cli_app(state=cli_state_with_mock_builder)
