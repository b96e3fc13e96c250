"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real filesystem, network and
process table.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import httpx
import pytest

from pls_cli.repositories.store import KeyValueStore


def _drop_file_handlers():
    """Close the pls log file handler, leaving pytest's capture handlers alone."""
    import pls_cli.utils.logger as logger_mod

    logger = logging.getLogger("pls_cli")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolate_environment(tmp_path, monkeypatch):
    """Point every pls directory into *tmp_path* and reset singletons."""
    from pls_cli.utils.ui.console import get_console

    monkeypatch.setenv("PLS_HOME", str(tmp_path / "home"))
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setenv("NO_COLOR", "1")
    get_console.cache_clear()
    _drop_file_handlers()

    yield

    _drop_file_handlers()
    get_console.cache_clear()


@pytest.fixture(autouse=True)
def no_network():
    """Fail any weather request a test did not explicitly mock."""
    with patch(
        "pls_cli.services.weather_service.httpx.get",
        side_effect=httpx.ConnectError("network disabled in tests"),
    ) as mock_get:
        yield mock_get


@pytest.fixture(autouse=True)
def no_spawn():
    """Never start real background processes."""
    with patch("pls_cli.utils.background.subprocess.Popen") as mock_popen:
        yield mock_popen


@pytest.fixture()
def store_path(tmp_path):
    return tmp_path / "home" / "pls.json"


@pytest.fixture()
def store(store_path):
    return KeyValueStore.load_or_new(store_path)
