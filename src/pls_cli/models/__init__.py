"""pls domain models.

Pydantic models for the entities persisted in the store document: tasks, the
user profile and the weather cache entry.
"""

from .exceptions import PlsError, StoreError, WeatherFetchError
from .profile import Profile
from .task import Task, TaskList
from .weather import WeatherCacheEntry

__all__ = [
    "PlsError",
    "StoreError",
    "WeatherFetchError",
    "Profile",
    "Task",
    "TaskList",
    "WeatherCacheEntry",
]
