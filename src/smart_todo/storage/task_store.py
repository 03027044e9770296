"""JSON file persistence for the task collection."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from platformdirs import user_data_dir
from pydantic import TypeAdapter, ValidationError

from smart_todo.core.observable import ObservableTaskList
from smart_todo.errors import TaskStoreError
from smart_todo.models.task import Task
from smart_todo.utils.logger import get_logger

FORMAT_VERSION = 1
DEFAULT_FILE_NAME = "tasks.json"

_tasks_adapter = TypeAdapter(list[Task])


def default_task_file() -> Path:
    """Return the task file location inside the user data dir."""
    return Path(user_data_dir("smart_todo")) / DEFAULT_FILE_NAME


class TaskStore:
    """Loads and saves the task list as a JSON document.

    The file looks like ``{"version": 1, "tasks": [{...}, ...]}``. A missing
    file is an empty task list. An unreadable or invalid one is moved aside
    to ``tasks.json.bak-<timestamp>`` and treated as empty so the app can
    still start. If it cannot be moved aside, saving is refused so the
    original content is never overwritten.
    """

    def __init__(self, path: str | Path | None = None):
        if path is not None:
            self.path = Path(path).expanduser()
        else:
            self.path = default_task_file()
        self.save_blocked = False

    def load(self) -> ObservableTaskList:
        """Load the task list from disk."""
        logger = get_logger("store")
        if not self.path.exists():
            logger.info("no task file at %s, starting empty", self.path)
            return ObservableTaskList()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            raw_tasks = data.get("tasks", []) if isinstance(data, dict) else data
            tasks = _tasks_adapter.validate_python(raw_tasks)
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("could not read task file %s: %s", self.path, e)
            self._set_aside()
            return ObservableTaskList()

        logger.info("loaded %d task(s) from %s", len(tasks), self.path)
        return ObservableTaskList(tasks)

    def _set_aside(self) -> None:
        """Move the unreadable task file out of the way of the next save."""
        logger = get_logger("store")
        backup = self.path.with_name(
            f"{self.path.name}.bak-{datetime.now():%Y%m%d-%H%M%S}"
        )
        try:
            self.path.replace(backup)
        except OSError as e:
            logger.error("could not move %s aside, saving disabled: %s", self.path, e)
            self.save_blocked = True
            return
        logger.warning("moved unreadable task file to %s", backup)

    def save(self, tasks: Iterable[Task]) -> None:
        """Write *tasks* to disk, replacing the previous file atomically.

        Raises:
            TaskStoreError: If the file cannot be written, or an unreadable
                file is still in its place
        """
        if self.save_blocked:
            raise TaskStoreError(
                f"Not saving: {self.path} could not be read and was not moved aside"
            )

        tasks = list(tasks)
        document = {
            "version": FORMAT_VERSION,
            "tasks": _tasks_adapter.dump_python(tasks, mode="json"),
        }

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=".tasks-", suffix=".json"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            get_logger("store").error("could not save tasks to %s: %s", self.path, e)
            raise TaskStoreError(f"Failed to save tasks to {self.path}: {e}") from e

        get_logger("store").debug("saved %d task(s) to %s", len(tasks), self.path)
