"""Main view controller.

Wires the five filter inputs to the observable task collection and keeps
the filtered view in sync with user input and with mutations made
elsewhere (the task form, list item actions, the CLI).
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Protocol

from smart_todo.core.controls import ChoiceControl, ValueControl
from smart_todo.core.filter_engine import FilteredTaskList, build_predicate
from smart_todo.core.observable import ListChange, ObservableTaskList
from smart_todo.core.options import (
    collect_category_options,
    collect_priority_options,
    restore_selection,
)
from smart_todo.models.filters import ALL_TASKS, COMPLETION_CHOICES, FilterState
from smart_todo.models.task import Task
from smart_todo.utils.logger import get_logger


class TaskStorePort(Protocol):
    """What the controller needs from task persistence."""

    def load(self) -> ObservableTaskList: ...

    def save(self, tasks: ObservableTaskList) -> None: ...


RedrawListener = Callable[[], None]


class MainViewController:
    """Controller for the main task view."""

    def __init__(
        self,
        store: TaskStorePort,
        *,
        default_completion: str = ALL_TASKS,
        on_redraw: RedrawListener | None = None,
    ):
        self._store = store
        self._redraw_listeners: list[RedrawListener] = []
        if on_redraw is not None:
            self._redraw_listeners.append(on_redraw)

        self.category_filter = ChoiceControl()
        self.priority_filter = ChoiceControl()
        self.completion_filter = ChoiceControl()
        self.date_filter: ValueControl[date] = ValueControl()
        self.search_field: ValueControl[str] = ValueControl("")

        self.tasks: ObservableTaskList = store.load()
        self.filtered_tasks = FilteredTaskList(self.tasks)

        self._initialize_filters(default_completion)
        self.apply_filters()

        self.tasks.subscribe(self._on_tasks_changed)
        for control in self._controls():
            control.add_listener(self._on_filter_input_changed)

    def _controls(self) -> tuple[ValueControl, ...]:
        return (
            self.category_filter,
            self.priority_filter,
            self.completion_filter,
            self.date_filter,
            self.search_field,
        )

    # -------------------- filtering --------------------

    def filter_state(self) -> FilterState:
        """Read the current control values into a FilterState."""
        return FilterState(
            category=self.category_filter.value,
            priority=self.priority_filter.value,
            completion=self.completion_filter.value,
            due_date=self.date_filter.value,
            keyword=self.search_field.value,
        )

    def apply_filters(self) -> None:
        """Reapply the predicate built from the current filter inputs."""
        self.filtered_tasks.set_predicate(build_predicate(self.filter_state()))

    def refresh_category_options(self) -> None:
        previous = self.category_filter.value
        options = collect_category_options(self.tasks)
        self.category_filter.set_items(options)
        self.category_filter.value = restore_selection(previous, options)

    def refresh_priority_options(self) -> None:
        previous = self.priority_filter.value
        options = collect_priority_options(self.tasks)
        self.priority_filter.set_items(options)
        self.priority_filter.value = restore_selection(previous, options)

    def _initialize_filters(self, default_completion: str) -> None:
        self.completion_filter.set_items(COMPLETION_CHOICES)
        if default_completion in COMPLETION_CHOICES:
            self.completion_filter.value = default_completion
        else:
            self.completion_filter.select_first()

        self.refresh_category_options()
        self.refresh_priority_options()
        self.date_filter.value = None

    def _on_tasks_changed(self, change: ListChange) -> None:
        # Options first, so a stale selection falls back before filtering
        self.refresh_category_options()
        self.refresh_priority_options()
        self.apply_filters()

    def _on_filter_input_changed(self, _old, _new) -> None:
        self.apply_filters()

    def close(self) -> None:
        """Stop following the collection and the filter inputs."""
        self.tasks.unsubscribe(self._on_tasks_changed)
        self.filtered_tasks.detach()
        for control in self._controls():
            control.remove_listener(self._on_filter_input_changed)
        self._redraw_listeners.clear()

    # -------------------- view refresh --------------------

    def add_redraw_listener(self, listener: RedrawListener) -> None:
        self._redraw_listeners.append(listener)

    def remove_redraw_listener(self, listener: RedrawListener) -> None:
        if listener in self._redraw_listeners:
            self._redraw_listeners.remove(listener)

    def refresh_view(self) -> None:
        """Redraw the list, rebuild the filter options and reapply the filters.

        Needed after in-place task edits, which are not collection changes.
        """
        for listener in list(self._redraw_listeners):
            listener()
        self.refresh_category_options()
        self.refresh_priority_options()
        self.apply_filters()

    # -------------------- maintenance --------------------

    def clear_completed(self) -> bool:
        """Remove every completed task.

        Returns:
            True if tasks were removed and the collection was saved
        """
        if not self.tasks:
            return False

        count = len(self.tasks)
        removed = self.tasks.remove_if(lambda task: task.completed)
        if removed:
            get_logger("controller").info(
                "cleared %d completed task(s)", count - len(self.tasks)
            )
            self._store.save(self.tasks)
            self.refresh_view()
        return removed

    def clear_overdue(self, today: date | None = None) -> bool:
        """Remove every task whose due date is before *today*.

        Args:
            today: Reference date, defaults to the current date

        Returns:
            True if tasks were removed and the collection was saved
        """
        if not self.tasks:
            return False

        today = today or date.today()
        count = len(self.tasks)
        removed = self.tasks.remove_if(lambda task: task.is_overdue(today))
        if removed:
            get_logger("controller").info(
                "cleared %d overdue task(s) before %s",
                count - len(self.tasks),
                today.isoformat(),
            )
            self._store.save(self.tasks)
            self.refresh_view()
        return removed

    # -------------------- list item actions --------------------

    def toggle_completed(self, task: Task) -> bool:
        """Flip the completion flag of *task* and save.

        Returns:
            The new completion state
        """
        task.completed = not task.completed
        self.tasks.notify_updated(task)
        self._store.save(self.tasks)
        return task.completed

    def delete_task(self, task: Task) -> None:
        """Remove *task* from the collection and save."""
        self.tasks.remove(task)
        get_logger("controller").info("deleted task %r", task.name)
        self._store.save(self.tasks)

    def save(self) -> None:
        """Persist the collection as it is now."""
        self._store.save(self.tasks)
