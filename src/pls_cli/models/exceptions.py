"""Custom exceptions for pls."""

from pls_cli.utils import exit_codes


class PlsError(Exception):
    """Base exception for all pls errors, carrying a process exit code."""

    exit_code: int = exit_codes.ERROR_GENERAL

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class StoreError(PlsError):
    """Raised when the store file cannot be read or written."""

    exit_code = exit_codes.ERROR_PERSISTENCE


class WeatherFetchError(PlsError):
    """Raised when the weather provider is unreachable or answers with an error."""

    exit_code = exit_codes.ERROR_NETWORK
