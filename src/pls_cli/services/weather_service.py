"""Weather service - cached weather text with a non-blocking refresh policy.

The cache is two store keys written together: the raw provider text and the
unix time of the fetch that produced it. Reads never wait on the network once
something has been cached; a stale cache is shown with a note and refreshed by
a detached pls process for the next launch.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from urllib.parse import quote

import httpx

from pls_cli.config import WeatherConfig
from pls_cli.models.exceptions import WeatherFetchError
from pls_cli.models.weather import WeatherCacheEntry
from pls_cli.repositories.store import KeyValueStore
from pls_cli.utils.background import spawn_weather_refresh
from pls_cli.utils.logger import get_logger
from pls_cli.utils.refresh_marker import RefreshMarker

WEATHER_CACHED_KEY = "weather-cached"
WEATHER_TIMESTAMP_KEY = "weather-timestamp"
WEATHER_LOCATION_KEY = "weather-specific-location"


def annotate_stale(text: str, age: int) -> str:
    """Append the outdated note shown for a stale cache."""
    return f"{text} ({age // 60} min outdated, will be updated on next launch)"


class WeatherService:
    """Weather cache backed by the key-value store.

    Args:
        store: Store holding the cache and the specific location
        config: Provider endpoint, timeout and staleness threshold
        clock: Returns the current unix time
        trigger: Starts a background refresh, returning True on success
        marker: Records in-flight background refreshes
    """

    def __init__(
        self,
        store: KeyValueStore,
        config: WeatherConfig | None = None,
        *,
        clock: Callable[[], float] = time.time,
        trigger: Callable[[], bool] = spawn_weather_refresh,
        marker: RefreshMarker | None = None,
    ):
        self.store = store
        self.config = config or WeatherConfig()
        self.clock = clock
        self.trigger = trigger
        self.marker = marker or RefreshMarker(ttl=self.config.refresh_lock_ttl)
        self.logger = get_logger()

    @property
    def specific_location(self) -> str:
        return self.store.get(WEATHER_LOCATION_KEY, str) or ""

    def cached_entry(self) -> WeatherCacheEntry:
        return WeatherCacheEntry(
            cached_text=self.store.get(WEATHER_CACHED_KEY, str),
            timestamp=self.store.get(WEATHER_TIMESTAMP_KEY, int),
        )

    def get_weather(self, force_refresh: bool = False) -> str:
        """Return the weather line to display.

        Raises:
            WeatherFetchError: When a synchronous fetch was needed and failed
        """
        now = int(self.clock())
        entry = self.cached_entry()
        age = entry.age(now)

        if age is None or force_refresh:
            return self.fetch_and_cache(now)

        if age > self.config.threshold or entry.cached_text is None:
            self.request_background_refresh()
            if entry.cached_text is None:
                return ""
            return annotate_stale(entry.cached_text, age)

        return entry.cached_text

    def fetch_and_cache(self, now: int | None = None) -> str:
        """Fetch the weather synchronously and store it with its timestamp."""
        if now is None:
            now = int(self.clock())
        try:
            text = self.fetch()
        finally:
            self.marker.clear()

        self.store.set_many({WEATHER_CACHED_KEY: text, WEATHER_TIMESTAMP_KEY: now})
        self.logger.info("weather cached at %d", now)
        return text

    def fetch(self) -> str:
        """Single GET against the weather provider.

        Raises:
            WeatherFetchError: On transport errors or a non-success status
        """
        location = self.specific_location
        url = (
            f"{self.config.endpoint.rstrip('/')}/{quote(location)}"
            f"?format={self.config.format}"
        )
        self.logger.info("fetching weather for %r", location or "<ip>")
        try:
            response = httpx.get(url, timeout=self.config.timeout)
        except httpx.HTTPError as e:
            self.logger.warning("weather fetch failed: %s", e)
            raise WeatherFetchError(f"Weather service unreachable: {e}") from e

        if not response.is_success:
            self.logger.warning("weather fetch returned HTTP %d", response.status_code)
            raise WeatherFetchError(
                f"Weather service returned HTTP {response.status_code}"
            )
        return response.text.strip()

    def locate(self) -> str:
        """Location the provider guesses from our IP address, or "" if unknown."""
        try:
            response = httpx.get(
                f"{self.config.endpoint.rstrip('/')}/?format=%l",
                timeout=self.config.timeout,
            )
        except httpx.HTTPError as e:
            self.logger.warning("location lookup failed: %s", e)
            return ""
        return response.text.strip() if response.is_success else ""

    def request_background_refresh(self) -> bool:
        """Start a background refresh unless one was requested recently."""
        if self.marker.is_active():
            self.logger.debug("background refresh already in flight, skipping")
            return False
        started = self.trigger()
        if started:
            self.marker.mark()
        return started
