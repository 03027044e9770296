"""Derive the selectable category and priority filter options."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from smart_todo.models.filters import ALL_CATEGORIES, ALL_PRIORITIES
from smart_todo.models.task import Task


def collect_category_options(tasks: Iterable[Task]) -> list[str]:
    """Return the category choices for *tasks*.

    The list starts with the "All Categories" sentinel, followed by each
    distinct non-blank category in order of first appearance. Categories
    are de-duplicated by exact string equality.
    """
    categories: dict[str, None] = {}
    for task in tasks:
        category = task.category
        if category is not None and category.strip():
            categories.setdefault(category, None)
    return [ALL_CATEGORIES, *categories]


def collect_priority_options(tasks: Iterable[Task]) -> list[str]:
    """Return the priority choices for *tasks*, rendered as text."""
    priorities: dict[str, None] = {}
    for task in tasks:
        if task.priority is not None:
            priorities.setdefault(str(task.priority), None)
    return [ALL_PRIORITIES, *priorities]


def restore_selection(previous: str | None, options: Sequence[str]) -> str | None:
    """Keep *previous* if it is still offered, otherwise fall back to the first option."""
    if previous is not None and previous in options:
        return previous
    return options[0] if options else None
