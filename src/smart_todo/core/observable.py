"""Observable task collection.

The collection is the single source of truth for the main view. Every
mutating operation notifies subscribed observers synchronously, before
control returns to the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, MutableSequence
from dataclasses import dataclass, field
from typing import Literal, overload

from smart_todo.models.task import Task

ChangeKind = Literal["added", "removed", "replaced", "updated"]


@dataclass(frozen=True)
class ListChange:
    """Describes a single mutation of an ObservableTaskList."""

    kind: ChangeKind
    tasks: tuple[Task, ...] = field(default_factory=tuple)


Observer = Callable[[ListChange], None]


class ObservableTaskList(MutableSequence[Task]):
    """A mutable, ordered list of tasks that notifies observers on change."""

    def __init__(self, tasks: Iterable[Task] | None = None):
        self._items: list[Task] = list(tasks or [])
        self._observers: list[Observer] = []

    # -------------------- observers --------------------

    def subscribe(self, observer: Observer) -> None:
        """Register *observer* to be called after every mutation."""
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        """Stop notifying *observer*. Unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, kind: ChangeKind, tasks: Iterable[Task]) -> None:
        change = ListChange(kind=kind, tasks=tuple(tasks))
        # Copy so observers may unsubscribe while being notified
        for observer in list(self._observers):
            observer(change)

    # -------------------- sequence protocol --------------------

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._items)

    @overload
    def __getitem__(self, index: int) -> Task: ...

    @overload
    def __getitem__(self, index: slice) -> list[Task]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            old = self._items[index]
            new = list(value)
            self._items[index] = new
            self._notify("replaced", [*old, *new])
            return
        old_task = self._items[index]
        self._items[index] = value
        self._notify("replaced", [old_task, value])

    def __delitem__(self, index) -> None:
        removed = self._items[index]
        del self._items[index]
        self._notify("removed", removed if isinstance(index, slice) else [removed])

    def insert(self, index: int, value: Task) -> None:
        self._items.insert(index, value)
        self._notify("added", [value])

    def index(self, value: Task, start: int = 0, stop: int | None = None) -> int:
        """Return the position of *value*, compared by identity."""
        stop = len(self._items) if stop is None else stop
        for i in range(start, min(stop, len(self._items))):
            if self._items[i] is value:
                return i
        raise ValueError("task is not in list")

    def __contains__(self, value: object) -> bool:
        return any(item is value for item in self._items)

    def __repr__(self) -> str:
        return f"ObservableTaskList({self._items!r})"

    # -------------------- bulk operations --------------------

    def extend(self, values: Iterable[Task]) -> None:
        added = list(values)
        if not added:
            return
        self._items.extend(added)
        self._notify("added", added)

    def clear(self) -> None:
        if not self._items:
            return
        removed = self._items
        self._items = []
        self._notify("removed", removed)

    def remove_if(self, predicate: Callable[[Task], bool]) -> bool:
        """Remove every task matching *predicate* in one batch.

        Returns:
            True if at least one task was removed
        """
        kept: list[Task] = []
        removed: list[Task] = []
        for task in self._items:
            (removed if predicate(task) else kept).append(task)
        if not removed:
            return False
        self._items = kept
        self._notify("removed", removed)
        return True

    def notify_updated(self, task: Task) -> None:
        """Signal that *task* was edited in place."""
        if task not in self:
            raise ValueError("task is not in list")
        self._notify("updated", [task])
