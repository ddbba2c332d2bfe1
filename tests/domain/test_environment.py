"""Tests for environment resolution."""

import pytest

from devand_build.domain import ConfigurationError, EnvironmentName, resolve_environment


class TestResolveEnvironment:
    """Test mode selector resolution."""

    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("development", EnvironmentName.DEVELOPMENT),
            ("production", EnvironmentName.PRODUCTION),
            (EnvironmentName.PRODUCTION, EnvironmentName.PRODUCTION),
        ],
    )
    def test_known_selectors(self, selector, expected):
        assert resolve_environment(selector) is expected

    @pytest.mark.parametrize("selector", ["staging", "Production", "", "dev", None])
    def test_unknown_selector_raises(self, selector):
        with pytest.raises(ConfigurationError, match="unknown environment") as exc:
            resolve_environment(selector)

        assert exc.value.selector == selector

    def test_error_lists_known_environments(self):
        with pytest.raises(ConfigurationError, match="development, production"):
            resolve_environment("staging")
