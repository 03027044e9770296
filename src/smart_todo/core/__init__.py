"""Toolkit-independent core of the main task view."""

from .controller import MainViewController
from .filter_engine import FilteredTaskList, build_predicate, filter_tasks
from .observable import ListChange, ObservableTaskList
from .options import collect_category_options, collect_priority_options

__all__ = [
    "MainViewController",
    "FilteredTaskList",
    "build_predicate",
    "filter_tasks",
    "ListChange",
    "ObservableTaskList",
    "collect_category_options",
    "collect_priority_options",
]
