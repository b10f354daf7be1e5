"""Unit tests for logging setup and debug-mode detection."""

import logging

import pytest
from rich.logging import RichHandler
from tmexclude.core.log import DEBUG_ENV_VAR, configure_logging, debug_enabled_from_env


class TestDebugEnabledFromEnv:
    """Tests for debug_enabled_from_env."""

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", " 1 "])
    def test_truthy_values(self, value: str, monkeypatch: pytest.MonkeyPatch) -> None:
        """Common truthy spellings enable debug mode."""
        monkeypatch.setenv(DEBUG_ENV_VAR, value)
        assert debug_enabled_from_env() is True

    @pytest.mark.parametrize("value", ["", "0", "false", "no", "off"])
    def test_falsy_values(self, value: str, monkeypatch: pytest.MonkeyPatch) -> None:
        """Anything else leaves debug mode off."""
        monkeypatch.setenv(DEBUG_ENV_VAR, value)
        assert debug_enabled_from_env() is False

    def test_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An unset variable leaves debug mode off."""
        monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
        assert debug_enabled_from_env() is False


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_default_level_is_warning(self) -> None:
        """Without debug only warnings and errors are logged."""
        configure_logging()

        package_logger = logging.getLogger("tmexclude")
        assert package_logger.level == logging.WARNING
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0], RichHandler)

    def test_debug_level(self) -> None:
        """Debug mode logs everything."""
        configure_logging(debug=True)

        assert logging.getLogger("tmexclude.scanner.walker").getEffectiveLevel() == logging.DEBUG

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        """Configuring twice replaces the handler."""
        configure_logging()
        configure_logging(debug=True)

        assert len(logging.getLogger("tmexclude").handlers) == 1
