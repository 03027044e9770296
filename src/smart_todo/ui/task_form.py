"""Modal dialog for adding or editing a task."""

from __future__ import annotations

from pydantic import ValidationError
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Checkbox, Input, Label, Static

from smart_todo.core.controller import TaskStorePort
from smart_todo.core.observable import ObservableTaskList
from smart_todo.errors import TaskStoreError
from smart_todo.models.task import Task, TaskDraft
from smart_todo.utils.logger import get_logger


def format_validation_error(error: ValidationError) -> str:
    """Turn a pydantic error into one line per invalid field."""
    lines = []
    for err in error.errors():
        field = str(err["loc"][0]).replace("_", " ") if err["loc"] else "input"
        lines.append(f"{field}: {err['msg']}")
    return "\n".join(lines)


class TaskFormScreen(ModalScreen[bool]):
    """Add a task to the shared collection, or edit one in place.

    Dismisses with True when the task was saved and False when cancelled.
    """

    DEFAULT_CSS = """
    TaskFormScreen {
        align: center middle;
    }

    #task-form {
        width: 64;
        height: auto;
        padding: 1 2;
        border: thick $accent;
        background: $surface;
    }

    #task-form Input {
        margin-bottom: 1;
    }

    #form-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #form-error {
        color: $error;
        height: auto;
    }

    #form-buttons {
        height: auto;
        align-horizontal: right;
    }

    #form-buttons Button {
        margin-left: 1;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel")]

    def __init__(
        self,
        tasks: ObservableTaskList,
        store: TaskStorePort,
        task: Task | None = None,
    ):
        super().__init__()
        self.tasks = tasks
        self.store = store
        self.editing = task

    def compose(self) -> ComposeResult:
        task = self.editing
        with Vertical(id="task-form"):
            yield Label("Edit Task" if task else "Add Task", id="form-title")
            yield Input(value=task.name if task else "", placeholder="Name", id="name")
            yield Input(
                value=(task.description or "") if task else "",
                placeholder="Description",
                id="description",
            )
            yield Input(
                value=(task.category or "") if task else "",
                placeholder="Category",
                id="category",
            )
            yield Input(
                value=str(task.priority) if task and task.priority is not None else "",
                placeholder="Priority (number)",
                id="priority",
            )
            yield Input(
                value=task.due_date.isoformat() if task and task.due_date else "",
                placeholder="Due date (YYYY-MM-DD)",
                id="due-date",
            )
            yield Checkbox("Completed", value=task.completed if task else False, id="completed")
            yield Static("", id="form-error")
            with Horizontal(id="form-buttons"):
                yield Button("Save", variant="primary", id="save")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#name", Input).focus()

    def _value(self, widget_id: str) -> str:
        return self.query_one(f"#{widget_id}", Input).value

    def build_draft(self) -> TaskDraft:
        """Read the form fields into a validated draft.

        Raises:
            ValidationError: If any field is invalid
        """
        return TaskDraft(
            name=self._value("name"),
            description=self._value("description"),
            category=self._value("category"),
            priority=self._value("priority"),
            due_date=self._value("due-date"),
            completed=self.query_one("#completed", Checkbox).value,
        )

    @on(Button.Pressed, "#save")
    @on(Input.Submitted)
    def save(self) -> None:
        try:
            draft = self.build_draft()
        except ValidationError as e:
            self.query_one("#form-error", Static).update(format_validation_error(e))
            return

        logger = get_logger("form")
        if self.editing is not None:
            draft.apply_to(self.editing)
            logger.info("edited task %r", self.editing.name)
        else:
            self.tasks.append(draft.to_task())
            logger.info("added task %r", draft.name)

        try:
            self.store.save(self.tasks)
        except TaskStoreError as e:
            self.app.notify(str(e), title="Save failed", severity="error")

        self.dismiss(True)

    @on(Button.Pressed, "#cancel")
    def action_cancel(self) -> None:
        self.dismiss(False)
