"""Service layer for pls.

Services sit between the commands and the store, holding the rules for the
weather cache, the user profile and the greeting.
"""

from .greeting_service import build_greeting
from .profile_service import ProfileService
from .weather_service import WeatherService

__all__ = ["ProfileService", "WeatherService", "build_greeting"]
