"""Marker recording that a background weather refresh is in flight."""

import json
import time
from contextlib import suppress
from pathlib import Path

from pls_cli.config import get_cache_dir

MARKER_FILE_NAME = "weather_refresh.json"


class RefreshMarker:
    """Timestamp file shared between the foreground and the refresh process."""

    def __init__(self, cache_dir: Path | None = None, ttl: int = 60):
        self.cache_dir = cache_dir if cache_dir is not None else get_cache_dir()
        self.marker_file = self.cache_dir / MARKER_FILE_NAME
        self.ttl = ttl

    def _load(self) -> float | None:
        """Load the request timestamp, or None if missing or unreadable."""
        if not self.marker_file.exists():
            return None
        try:
            return float(json.loads(self.marker_file.read_text())["requested_at"])
        except Exception:
            return None

    def is_active(self) -> bool:
        """True if a refresh was requested less than ``ttl`` seconds ago."""
        requested_at = self._load()
        if requested_at is None:
            return False
        return time.time() - requested_at < self.ttl

    def mark(self) -> None:
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            self.marker_file.write_text(json.dumps({"requested_at": time.time()}))
        except Exception:
            pass

    def clear(self) -> None:
        with suppress(Exception):
            self.marker_file.unlink(missing_ok=True)
