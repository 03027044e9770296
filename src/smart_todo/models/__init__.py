"""Smart ToDo domain models.

Pydantic models for tasks, filter criteria and application configuration.
"""

from .config_models import (
    AppConfig,
    FilterConfig,
    LoggingConfig,
    StorageConfig,
    UIConfig,
)
from .filters import (
    ALL_CATEGORIES,
    ALL_PRIORITIES,
    ALL_TASKS,
    COMPLETED,
    COMPLETION_CHOICES,
    NOT_COMPLETED,
    FilterState,
)
from .task import Task, TaskDraft

__all__ = [
    # Task models
    "Task",
    "TaskDraft",
    # Filter models
    "FilterState",
    "ALL_CATEGORIES",
    "ALL_PRIORITIES",
    "ALL_TASKS",
    "COMPLETED",
    "NOT_COMPLETED",
    "COMPLETION_CHOICES",
    # Config models
    "AppConfig",
    "StorageConfig",
    "UIConfig",
    "FilterConfig",
    "LoggingConfig",
]
