"""Custom exceptions for Smart ToDo."""


class SmartTodoError(Exception):
    """Base exception for all Smart ToDo errors."""


class TaskStoreError(SmartTodoError):
    """Raised when the task collection cannot be written to disk."""
