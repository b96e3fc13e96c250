"""Weather cache models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class WeatherCacheEntry(BaseModel):
    """The last successful weather fetch.

    ``cached_text`` is always the raw provider answer; staleness notes are only
    added when the text is displayed.
    """

    cached_text: str | None = None
    timestamp: int | None = Field(default=None, description="Unix seconds")

    def age(self, now: int) -> int | None:
        """Seconds elapsed since the fetch, or None if never fetched."""
        if self.timestamp is None:
            return None
        return now - self.timestamp
