"""Task persistence."""

from .task_store import TaskStore, default_task_file

__all__ = ["TaskStore", "default_task_file"]
