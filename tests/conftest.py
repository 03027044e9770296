"""Shared test fixtures and configuration.

Keeps tests away from the real user config, data and log directories.
"""

from __future__ import annotations

import logging
from datetime import date
from unittest.mock import patch

import pytest

from smart_todo.core.observable import ObservableTaskList
from smart_todo.models.task import Task


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


def _reset_logger(logger_mod) -> None:
    """Detach and close the app file handler, leaving foreign handlers alone."""
    if logger_mod._handler is not None:
        logging.getLogger("smart_todo").removeHandler(logger_mod._handler)
        logger_mod._handler.close()
    logger_mod._handler = None
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point every platformdirs lookup at *tmp_path* and reset singletons."""
    import smart_todo.utils.logger as logger_mod
    from smart_todo.services.config_service import get_config_service

    log_dir = tmp_path / "logs"
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"

    _reset_logger(logger_mod)
    get_config_service.cache_clear()

    with (
        patch("smart_todo.utils.logger.user_log_dir", return_value=str(log_dir)),
        patch("smart_todo.services.config_service.user_config_dir", return_value=str(config_dir)),
        patch("smart_todo.services.config_service.user_data_dir", return_value=str(data_dir)),
        patch("smart_todo.storage.task_store.user_data_dir", return_value=str(data_dir)),
    ):
        yield tmp_path

    _reset_logger(logger_mod)
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Task helpers
# ---------------------------------------------------------------------------


def make_task(name: str = "Task", **fields) -> Task:
    return Task(name=name, **fields)


class RecordingStore:
    """In-memory task store that counts saves."""

    def __init__(self, tasks: list[Task] | None = None):
        self.tasks = list(tasks or [])
        self.saves: list[list[Task]] = []

    def load(self) -> ObservableTaskList:
        return ObservableTaskList(self.tasks)

    def save(self, tasks) -> None:
        self.saves.append(list(tasks))


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return [
        make_task(
            "Write report",
            description="Quarterly numbers",
            category="Work",
            priority=1,
            due_date=date(2024, 5, 31),
        ),
        make_task(
            "Call plumber",
            description="Urgent call about the leak",
            category="Home",
            priority=2,
            due_date=date(2024, 6, 1),
        ),
        make_task("Review PR", category="Work", priority=1, completed=True),
        make_task("Buy stamps", category="Errands", due_date=date(2024, 6, 3)),
    ]


@pytest.fixture()
def recording_store(sample_tasks) -> RecordingStore:
    return RecordingStore(sample_tasks)
