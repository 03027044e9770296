"""Filter criteria for the main task view."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel

ALL_CATEGORIES = "All Categories"
ALL_PRIORITIES = "All Priorities"

ALL_TASKS = "All Tasks"
COMPLETED = "Completed"
NOT_COMPLETED = "Not Completed"
COMPLETION_CHOICES: tuple[str, ...] = (ALL_TASKS, COMPLETED, NOT_COMPLETED)


class FilterState(BaseModel):
    """Snapshot of the five user-selected filter criteria.

    Attributes:
        category: "All Categories" or a category present in the task list
        priority: "All Priorities" or a priority rendered as text
        completion: one of COMPLETION_CHOICES
        due_date: exact due date to match
        keyword: free-text search term
    """

    category: str | None = ALL_CATEGORIES
    priority: str | None = ALL_PRIORITIES
    completion: str | None = ALL_TASKS
    due_date: date | None = None
    keyword: str | None = None
