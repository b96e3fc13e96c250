"""Detached re-invocation of pls for background weather refresh."""

import subprocess
import sys

from pls_cli.utils.logger import get_logger

REFRESH_ARGS = ["--refresh", "--quiet"]


def refresh_command() -> list[str]:
    """Command line that re-runs pls with a forced weather refresh."""
    return [sys.executable, "-m", "pls_cli", *REFRESH_ARGS]


def spawn_weather_refresh() -> bool:
    """
    Start a background pls process that refreshes the weather cache.

    The child is detached from the current session with all standard streams
    on the null device. It is never waited on; its result is only seen by a
    later invocation reading the updated store.

    Returns:
        True if the process was started
    """
    args = refresh_command()
    try:
        subprocess.Popen(
            args,
            start_new_session=True,  # Detach from parent session
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
        )
    except OSError as e:
        get_logger().warning("could not start background refresh: %s", e)
        return False
    get_logger().info("background weather refresh started: %s", " ".join(args))
    return True
