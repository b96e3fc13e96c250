"""Persistence layer for pls.

- :class:`KeyValueStore`: the single JSON document holding all state
- :class:`TaskRepository`: the ordered task list stored under ``tasks``
"""

from .store import KeyValueStore
from .task_repository import TASKS_KEY, TaskRepository

__all__ = ["KeyValueStore", "TaskRepository", "TASKS_KEY"]
