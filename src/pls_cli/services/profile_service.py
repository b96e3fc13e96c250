"""Profile service - the user details collected on first run."""

from __future__ import annotations

from pls_cli.models.profile import Profile
from pls_cli.repositories.store import KeyValueStore
from pls_cli.services.weather_service import WEATHER_LOCATION_KEY

NAME_KEY = "name"
WEATHER_ENABLED_KEY = "weather"


class ProfileService:
    """Reads and writes the profile fields of the store document."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def has_name(self) -> bool:
        return self.store.exists(NAME_KEY)

    def has_weather_choice(self) -> bool:
        return self.store.exists(WEATHER_ENABLED_KEY)

    def get_profile(self) -> Profile | None:
        name = self.store.get(NAME_KEY, str)
        if name is None:
            return None
        return Profile(
            name=name,
            weather=bool(self.store.get(WEATHER_ENABLED_KEY, bool)),
            weather_specific_location=self.store.get(WEATHER_LOCATION_KEY, str),
        )

    def weather_enabled(self) -> bool:
        return bool(self.store.get(WEATHER_ENABLED_KEY, bool))

    def set_name(self, name: str) -> None:
        self.store.set(NAME_KEY, name)

    def set_weather(self, enabled: bool) -> None:
        self.store.set(WEATHER_ENABLED_KEY, enabled)

    def set_specific_location(self, location: str) -> None:
        self.store.set(WEATHER_LOCATION_KEY, location)
