"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pls_cli.models.exceptions import PlsError
from pls_cli.utils.logger import get_logger
from pls_cli.utils.ui.formatters import format_error


def command_wrapper(func: Callable):
    """Log the command's lifetime and turn errors into clean exits.

    :class:`PlsError` subclasses exit with their own code; anything else is
    logged with its traceback and exits with code 1.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except PlsError as e:
            elapsed = time.monotonic() - start
            logger.error("command failed: %s (%.3fs) - %s", cmd, elapsed, str(e))
            format_error(str(e))
            raise typer.Exit(code=e.exit_code) from e

        except (typer.Exit, typer.Abort):
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=1) from e

    return wrapper
