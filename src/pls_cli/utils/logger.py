"""Rotating file logger shared by every pls process.

The foreground command and the detached weather refresh write to the same
file, so each line carries the pid of the process that wrote it.
"""

from __future__ import annotations

import logging
import logging.handlers

_LOGGER_NAME = "pls_cli"
_LOG_FILE = "pls.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _has_file_handler(logger: logging.Logger) -> bool:
    return any(
        isinstance(handler, logging.handlers.RotatingFileHandler)
        for handler in logger.handlers
    )


def get_logger() -> logging.Logger:
    """Return the singleton application logger, initialising it on first call.

    Logs go to ``$PLS_HOME/logs`` when ``PLS_HOME`` is set, otherwise to the
    platform log directory.
    """
    global _logger
    if _logger is not None:
        return _logger

    # config imports this module, so resolve the directory lazily
    from pls_cli.config import get_log_dir

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if not _has_file_handler(logger):
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_dir / _LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] pid=%(process)d %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)

    _logger = logger
    return _logger

