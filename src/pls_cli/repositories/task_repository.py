"""Task repository built on the key-value store.

Every operation reads the full list, changes it in memory and writes the full
list back under :data:`TASKS_KEY`. Indexes are 1-based at this boundary.
"""

from __future__ import annotations

from pls_cli.models.task import Task, TaskList
from pls_cli.repositories.store import KeyValueStore

TASKS_KEY = "tasks"


def to_position(index: int) -> int:
    """Convert a 1-based index to a list position.

    Saturates at zero, so 0 and 1 both address the first task.
    """
    return max(index - 1, 0)


class TaskRepository:
    """Ordered list of :class:`Task` records."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def list(self) -> list[Task]:
        return self.store.get(TASKS_KEY, TaskList) or []

    def _save(self, tasks: list[Task]) -> None:
        self.store.set(TASKS_KEY, tasks)

    def add(self, title: str) -> Task:
        task = Task(title=title)
        tasks = self.list()
        tasks.append(task)
        self._save(tasks)
        return task

    def set_completed(self, index: int, value: bool) -> bool:
        """Set the completion flag of one task.

        Returns:
            False if no task exists at *index*; the list is left untouched
        """
        tasks = self.list()
        position = to_position(index)
        if position >= len(tasks):
            return False
        tasks[position] = tasks[position].with_completed(value)
        self._save(tasks)
        return True

    def set_completed_all(self, value: bool) -> int:
        """Set the completion flag of every task. Returns the task count."""
        tasks = [task.with_completed(value) for task in self.list()]
        self._save(tasks)
        return len(tasks)

    def remove(self, index: int) -> bool:
        """Remove one task. Returns False if no task exists at *index*."""
        tasks = self.list()
        position = to_position(index)
        if position >= len(tasks):
            return False
        del tasks[position]
        self._save(tasks)
        return True

    def remove_all(self) -> None:
        self.store.remove(TASKS_KEY)

    def clean(self) -> int:
        """Drop completed tasks, keeping the others in order.

        Returns:
            Number of tasks removed
        """
        tasks = self.list()
        pending = [task for task in tasks if not task.completed]
        self._save(pending)
        return len(tasks) - len(pending)

    def first_index(self, completed: bool) -> int | None:
        """1-based index of the first task whose flag equals *completed*."""
        for i, task in enumerate(self.list(), start=1):
            if task.completed == completed:
                return i
        return None
