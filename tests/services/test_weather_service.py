"""Tests for the weather cache and its refresh policy."""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from pls_cli.config import WeatherConfig
from pls_cli.models import WeatherFetchError
from pls_cli.services.weather_service import (
    WEATHER_CACHED_KEY,
    WEATHER_LOCATION_KEY,
    WEATHER_TIMESTAMP_KEY,
    WeatherService,
    annotate_stale,
)
from pls_cli.utils.refresh_marker import RefreshMarker

NOW = 1_700_000_000


@pytest.fixture()
def trigger():
    return MagicMock(return_value=True)


@pytest.fixture()
def marker(tmp_path):
    return RefreshMarker(cache_dir=tmp_path / "cache", ttl=60)


@pytest.fixture()
def service(store, trigger, marker):
    return WeatherService(
        store, WeatherConfig(), clock=lambda: NOW, trigger=trigger, marker=marker
    )


def ok_response(text="Paris: Sunny ☀️ +20°C\n"):
    return httpx.Response(200, text=text)


def seed_cache(store, text="Paris: Cloudy +12°C", age=0):
    store.set_many({WEATHER_CACHED_KEY: text, WEATHER_TIMESTAMP_KEY: NOW - age})


class TestFirstFetch:
    def test_fetches_and_caches(self, service, store):
        with patch(
            "pls_cli.services.weather_service.httpx.get", return_value=ok_response()
        ) as mock_get:
            text = service.get_weather()

        assert text == "Paris: Sunny ☀️ +20°C"
        assert mock_get.call_count == 1
        assert store.get(WEATHER_CACHED_KEY, str) == text
        assert store.get(WEATHER_TIMESTAMP_KEY, int) == NOW

    def test_failure_is_explicit(self, service, store):
        with pytest.raises(WeatherFetchError, match="unreachable"):
            service.get_weather()

        assert not store.exists(WEATHER_CACHED_KEY)
        assert not store.exists(WEATHER_TIMESTAMP_KEY)

    def test_http_error_status(self, service):
        with patch(
            "pls_cli.services.weather_service.httpx.get",
            return_value=httpx.Response(503, text="busy"),
        ):
            with pytest.raises(WeatherFetchError, match="503"):
                service.get_weather()


class TestFreshCache:
    def test_returns_cache_without_network(self, service, store, trigger, no_network):
        seed_cache(store, age=900)

        assert service.get_weather() == "Paris: Cloudy +12°C"
        no_network.assert_not_called()
        trigger.assert_not_called()


class TestStaleCache:
    def test_returns_annotated_cache_and_requests_refresh(
        self, service, store, trigger, no_network
    ):
        seed_cache(store, age=901)

        text = service.get_weather()

        assert text == "Paris: Cloudy +12°C (15 min outdated, will be updated on next launch)"
        no_network.assert_not_called()
        trigger.assert_called_once()

    def test_stored_text_stays_raw(self, service, store):
        seed_cache(store, age=3600)

        service.get_weather()

        assert store.get(WEATHER_CACHED_KEY, str) == "Paris: Cloudy +12°C"
        assert store.get(WEATHER_TIMESTAMP_KEY, int) == NOW - 3600

    def test_missing_text_with_timestamp(self, service, store, trigger):
        store.set(WEATHER_TIMESTAMP_KEY, NOW)

        assert service.get_weather() == ""
        trigger.assert_called_once()

    def test_repeated_calls_spawn_once(self, service, store, trigger):
        seed_cache(store, age=5000)

        service.get_weather()
        service.get_weather()
        service.get_weather()

        assert trigger.call_count == 1

    def test_failed_spawn_does_not_mark(self, service, store, trigger, marker):
        trigger.return_value = False
        seed_cache(store, age=5000)

        service.get_weather()

        assert not marker.is_active()

    def test_threshold_is_configurable(self, store, trigger, marker):
        service = WeatherService(
            store,
            WeatherConfig(threshold=3600),
            clock=lambda: NOW,
            trigger=trigger,
            marker=marker,
        )
        seed_cache(store, age=1800)

        assert service.get_weather() == "Paris: Cloudy +12°C"
        trigger.assert_not_called()


class TestForcedRefresh:
    def test_fetches_even_when_fresh(self, service, store, trigger):
        seed_cache(store, age=10)

        with patch(
            "pls_cli.services.weather_service.httpx.get",
            return_value=ok_response("Paris: Rain +9°C"),
        ):
            assert service.get_weather(force_refresh=True) == "Paris: Rain +9°C"

        assert store.get(WEATHER_CACHED_KEY, str) == "Paris: Rain +9°C"
        assert store.get(WEATHER_TIMESTAMP_KEY, int) == NOW
        trigger.assert_not_called()

    def test_failure_keeps_previous_cache(self, service, store):
        seed_cache(store, age=5000)

        with pytest.raises(WeatherFetchError):
            service.get_weather(force_refresh=True)

        assert store.get(WEATHER_CACHED_KEY, str) == "Paris: Cloudy +12°C"
        assert store.get(WEATHER_TIMESTAMP_KEY, int) == NOW - 5000

    def test_clears_refresh_marker(self, service, store, marker):
        marker.mark()

        with pytest.raises(WeatherFetchError):
            service.get_weather(force_refresh=True)

        assert not marker.is_active()


class TestRequest:
    def test_url_uses_specific_location(self, service, store):
        store.set(WEATHER_LOCATION_KEY, "New York")

        with patch(
            "pls_cli.services.weather_service.httpx.get", return_value=ok_response()
        ) as mock_get:
            service.fetch()

        url = mock_get.call_args[0][0]
        assert url == "https://wttr.in/New%20York?format=%l:+%C+%c+%t"
        assert mock_get.call_args[1]["timeout"] == 10

    def test_url_without_location_lets_provider_geolocate(self, service):
        with patch(
            "pls_cli.services.weather_service.httpx.get", return_value=ok_response()
        ) as mock_get:
            service.fetch()

        assert mock_get.call_args[0][0] == "https://wttr.in/?format=%l:+%C+%c+%t"

    def test_locate(self, service):
        with patch(
            "pls_cli.services.weather_service.httpx.get",
            return_value=ok_response("Lyon, France\n"),
        ):
            assert service.locate() == "Lyon, France"

    def test_locate_failure_is_empty(self, service):
        assert service.locate() == ""


def test_annotate_stale_truncates_minutes():
    assert annotate_stale("x", 119) == "x (1 min outdated, will be updated on next launch)"
