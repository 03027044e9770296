"""Toolkit-independent value holders for the filter inputs.

The controller reads and writes these; the Textual layer mirrors them onto
real widgets and writes user edits back.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")

ValueListener = Callable[[T | None, T | None], None]
ItemsListener = Callable[[list[str]], None]


class ValueControl(Generic[T]):
    """A single value with change listeners."""

    def __init__(self, value: T | None = None):
        self._value = value
        self._listeners: list[ValueListener] = []

    @property
    def value(self) -> T | None:
        return self._value

    @value.setter
    def value(self, new_value: T | None) -> None:
        old_value = self._value
        if new_value == old_value:
            return
        self._value = new_value
        for listener in list(self._listeners):
            listener(old_value, new_value)

    def add_listener(self, listener: ValueListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ValueListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)


class ChoiceControl(ValueControl[str]):
    """A value chosen from a list of offered items."""

    def __init__(self, items: Iterable[str] = (), value: str | None = None):
        super().__init__(value)
        self._items: list[str] = list(items)
        self._item_listeners: list[ItemsListener] = []

    @property
    def items(self) -> list[str]:
        return list(self._items)

    def set_items(self, items: Iterable[str]) -> None:
        """Replace the offered items. The current value is left untouched."""
        self._items = list(items)
        for listener in list(self._item_listeners):
            listener(self.items)

    def select_first(self) -> None:
        self.value = self._items[0] if self._items else None

    def add_items_listener(self, listener: ItemsListener) -> None:
        self._item_listeners.append(listener)
