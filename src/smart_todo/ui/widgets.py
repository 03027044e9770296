"""Widgets for the task list."""

from __future__ import annotations

from datetime import date

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.widgets import Label, ListItem, ListView

from smart_todo.models.task import Task

UNCHECKED = "☐"
CHECKED = "☑"


def describe_task(task: Task, today: date) -> str:
    """Render one task as a single line of Rich markup."""
    checkbox = CHECKED if task.completed else UNCHECKED
    name = escape(task.name) if task.name else "[dim](untitled)[/dim]"
    if task.completed:
        name = f"[strike]{name}[/strike]"

    parts = [f"{checkbox} {name}"]
    if task.category:
        parts.append(f"[cyan]#{escape(task.category)}[/cyan]")
    if task.priority is not None:
        parts.append(f"[magenta]P{task.priority}[/magenta]")
    if task.due_date is not None:
        due = task.due_date.isoformat()
        if task.is_overdue(today) and not task.completed:
            parts.append(f"[red]due {due}[/red]")
        elif task.due_date == today:
            parts.append(f"[yellow]due {due}[/yellow]")
        else:
            parts.append(f"[dim]due {due}[/dim]")
    return "  ".join(parts)


class TaskListItem(ListItem):
    """A row in the task list bound to one Task."""

    def __init__(self, task: Task, today: date):
        super().__init__(classes="task-item")
        self.model = task
        self.today = today
        if task.completed:
            self.add_class("-completed")

    def compose(self) -> ComposeResult:
        yield Label(describe_task(self.model, self.today))
        if self.model.description:
            yield Label(escape(self.model.description), classes="task-description")


class TaskListView(ListView):
    """The filtered task list."""

    BINDINGS = [
        Binding("space", "app.toggle_completed", "Done/Undone"),
        Binding("delete", "app.delete_task", "Delete"),
    ]

    @property
    def highlighted_task(self) -> Task | None:
        item = self.highlighted_child
        if isinstance(item, TaskListItem):
            return item.model
        return None
