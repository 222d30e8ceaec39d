"""Tests for the environment helper functionality in argkit."""

import pytest

from argkit.environment_helper import EnvironmentHelper, debug_log


class TestEnvironmentHelperUnit:
    """Unit tests for the EnvironmentHelper class."""

    def test_debug_log_no_output_when_disabled(self, capsys):
        """Test that debug_log doesn't output when ARGKIT_DEBUG is not set."""
        debug_log("test message")
        captured = capsys.readouterr()
        assert "test message" not in captured.err

    @pytest.mark.parametrize(
        "debug_value", ["1", "true", "yes", "on", "TRUE", "YES", "ON", " on "]
    )
    def test_debug_log_outputs_when_enabled(self, capsys, monkeypatch, debug_value):
        """Test that debug_log outputs when ARGKIT_DEBUG is set to truthy values."""
        monkeypatch.setenv("ARGKIT_DEBUG", debug_value)
        debug_log("debug test message")
        captured = capsys.readouterr()
        assert "[DEBUG] debug test message" in captured.err
        assert captured.out == ""

    @pytest.mark.parametrize("debug_value", ["", "0", "false", "no", "off", "maybe"])
    def test_is_debug_enabled_falsy_values(self, monkeypatch, debug_value):
        monkeypatch.setenv("ARGKIT_DEBUG", debug_value)
        assert EnvironmentHelper.is_debug_enabled() is False
