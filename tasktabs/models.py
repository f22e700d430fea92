"""
Pydantic models for TaskTabs application.

Defines the task value held by the store and the short-lived input buffer
used while a new task is being typed in.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, computed_field

from tasktabs.exceptions import DraftIncompleteError


# Fields that must be non-empty before a draft can become a Task
REQUIRED_FIELDS = ("title", "description")


class Task(BaseModel):
    """
    Represents a single task.

    Tasks are immutable values without an identifier: two tasks with the same
    title, description, date and time are equal and interchangeable. The store
    relies on this structural equality to find tasks for removal.

    Empty strings are accepted here; the non-empty title/description rule is
    enforced by TaskDraft before submission, not by the model.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "description": "2%",
                "date": "2024-01-01",
                "time": "09:00",
            }
        },
    )

    title: str = Field(..., description="Task title")
    description: str = Field(..., description="Task description")
    date: str = Field(default="", description="Free-form due date")
    time: str = Field(default="", description="Free-form due time")

    @computed_field
    @property
    def when(self) -> str:
        """
        Combine date and time for display.

        Returns:
            "date time", whichever parts are set, or empty string
        """
        return " ".join(part for part in (self.date, self.time) if part)

    def summary(self) -> str:
        """
        Build a one-line summary for list rows and notifications.

        Returns:
            Title followed by the date/time in parentheses when present
        """
        if self.when:
            return f"{self.title} ({self.when})"
        return self.title


class TaskDraft(BaseModel):
    """
    Mutable input buffer for a task that is being created.

    Holds the raw text of the four fields while the creation dialog is open.
    It is discarded on cancel or once it has been turned into a Task.
    """

    model_config = ConfigDict(validate_assignment=True)

    title: str = ""
    description: str = ""
    date: str = ""
    time: str = ""

    def missing_fields(self) -> List[str]:
        """
        List required fields that are empty strings.

        Returns:
            Names of missing required fields, in form order
        """
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    @property
    def is_submittable(self) -> bool:
        """Whether the draft has every required field filled in."""
        return not self.missing_fields()

    def to_task(self) -> Task:
        """
        Build a Task from the field values exactly as typed.

        Returns:
            New Task instance

        Raises:
            DraftIncompleteError: If title or description is empty
        """
        missing = self.missing_fields()
        if missing:
            raise DraftIncompleteError(missing)

        return Task(
            title=self.title,
            description=self.description,
            date=self.date,
            time=self.time,
        )

    def clear(self) -> None:
        """Reset all fields to empty strings."""
        self.title = ""
        self.description = ""
        self.date = ""
        self.time = ""
