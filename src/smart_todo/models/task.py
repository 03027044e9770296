"""Task data models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Task(BaseModel):
    """Task model representing a single to-do entry.

    Attributes:
        name: Short task title
        description: Optional longer description
        category: Optional free-form category (e.g. "Work", "Home")
        priority: Optional numeric priority
        due_date: Optional calendar due date
        completed: Whether the task is done
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    description: str | None = None
    category: str | None = None
    priority: int | None = None
    due_date: date | None = None
    completed: bool = False

    def is_overdue(self, today: date) -> bool:
        """Return True when the task has a due date strictly before *today*."""
        return self.due_date is not None and self.due_date < today


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class TaskDraft(BaseModel):
    """Raw text entered in the task form, validated into task fields.

    Blank fields become None. Priority must be a whole number and the due
    date must use the ISO ``YYYY-MM-DD`` format.
    """

    name: str = Field(min_length=1)
    description: str | None = None
    category: str | None = None
    priority: int | None = None
    due_date: date | None = None
    completed: bool = False

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: str | None) -> str:
        return (v or "").strip()

    @field_validator("description", "category", "priority", "due_date", mode="before")
    @classmethod
    def blank_is_none(cls, v):
        if isinstance(v, str):
            return _blank_to_none(v)
        return v

    def to_task(self) -> Task:
        """Create a new Task from this draft."""
        return Task(**self.model_dump())

    def apply_to(self, task: Task) -> None:
        """Copy the draft's values onto *task* in place."""
        for field, value in self.model_dump().items():
            setattr(task, field, value)
