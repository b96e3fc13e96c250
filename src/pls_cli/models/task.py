"""Task data models."""

from pydantic import BaseModel, Field, TypeAdapter


class Task(BaseModel):
    """A single entry of the todo list."""

    title: str
    completed: bool = Field(default=False)

    def with_completed(self, value: bool) -> "Task":
        """Return a copy of this task with its completion flag set to *value*."""
        return self.model_copy(update={"completed": value})


TaskList = TypeAdapter(list[Task])
