"""Unit tests for the background refresh trigger (background.py)."""

from __future__ import annotations

import subprocess
import sys

from pls_cli.utils.background import refresh_command, spawn_weather_refresh


class TestSpawnWeatherRefresh:
    """Tests for spawn_weather_refresh()."""

    def test_reinvokes_pls_with_forced_refresh(self, no_spawn):
        assert spawn_weather_refresh() is True

        args = no_spawn.call_args[0][0]
        assert args == [sys.executable, "-m", "pls_cli", "--refresh", "--quiet"]

    def test_popen_detached(self, no_spawn):
        """Subprocess is started detached with every stream on the null device."""
        spawn_weather_refresh()

        call_kwargs = no_spawn.call_args[1]
        assert call_kwargs.get("start_new_session") is True
        assert call_kwargs.get("stdout") == subprocess.DEVNULL
        assert call_kwargs.get("stderr") == subprocess.DEVNULL
        assert call_kwargs.get("stdin") == subprocess.DEVNULL

    def test_not_awaited(self, no_spawn):
        spawn_weather_refresh()

        process = no_spawn.return_value
        process.wait.assert_not_called()
        process.communicate.assert_not_called()

    def test_spawn_failure_returns_false(self, no_spawn):
        no_spawn.side_effect = FileNotFoundError("python missing")

        assert spawn_weather_refresh() is False


def test_refresh_command_uses_current_interpreter():
    assert refresh_command()[0] == sys.executable
