"""Filter engine: predicate construction and the filtered task view."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

from smart_todo.core.observable import ListChange, ObservableTaskList
from smart_todo.models.filters import (
    ALL_CATEGORIES,
    ALL_PRIORITIES,
    COMPLETED,
    NOT_COMPLETED,
    FilterState,
)
from smart_todo.models.task import Task

TaskPredicate = Callable[[Task | None], bool]
ViewListener = Callable[[], None]


def accept_all(task: Task | None) -> bool:
    return task is not None


def _matches_keyword(task: Task, keyword: str) -> bool:
    lower_keyword = keyword.lower()

    for text in (task.name, task.description, task.category):
        if text is not None and lower_keyword in text.lower():
            return True

    # Priority and date text have no case, so they are matched literally
    if task.priority is not None and lower_keyword in str(task.priority):
        return True
    if task.due_date is not None and lower_keyword in task.due_date.isoformat():
        return True

    return False


def build_predicate(state: FilterState) -> TaskPredicate:
    """Build the membership predicate for *state*.

    A task passes when it satisfies every active criterion. "All" sentinels,
    None values and blank keywords leave their criterion inactive.
    """
    selected_category = state.category
    selected_priority = state.priority
    completion = state.completion
    selected_date = state.due_date
    keyword = state.keyword

    def predicate(task: Task | None) -> bool:
        if task is None:
            return False

        if selected_category is not None and selected_category != ALL_CATEGORIES:
            if task.category is None or task.category.lower() != selected_category.lower():
                return False

        if selected_priority is not None and selected_priority != ALL_PRIORITIES:
            if task.priority is None or str(task.priority) != selected_priority:
                return False

        if completion == COMPLETED and not task.completed:
            return False
        if completion == NOT_COMPLETED and task.completed:
            return False

        if selected_date is not None:
            if task.due_date is None or task.due_date != selected_date:
                return False

        if keyword is not None and keyword.strip():
            if not _matches_keyword(task, keyword):
                return False

        return True

    return predicate


def filter_tasks(tasks: Sequence[Task], state: FilterState) -> list[Task]:
    """Return the tasks matching *state*, preserving order."""
    predicate = build_predicate(state)
    return [task for task in tasks if predicate(task)]


class FilteredTaskList(Sequence[Task]):
    """A read-only projection of an ObservableTaskList.

    Membership is recomputed over the whole source whenever the predicate is
    replaced or the source changes.
    """

    def __init__(
        self, source: ObservableTaskList, predicate: TaskPredicate = accept_all
    ):
        self._source = source
        self._predicate = predicate
        self._items: list[Task] = []
        self._listeners: list[ViewListener] = []
        self._recompute()
        source.subscribe(self._on_source_changed)

    def set_predicate(self, predicate: TaskPredicate) -> None:
        self._predicate = predicate
        self._recompute()

    def subscribe(self, listener: ViewListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ViewListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def detach(self) -> None:
        """Stop following the source collection."""
        self._source.unsubscribe(self._on_source_changed)

    def _on_source_changed(self, _change: ListChange) -> None:
        self._recompute()

    def _recompute(self) -> None:
        self._items = [task for task in self._source if self._predicate(task)]
        for listener in list(self._listeners):
            listener()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __contains__(self, value: object) -> bool:
        return any(item is value for item in self._items)
