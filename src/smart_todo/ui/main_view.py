"""Textual app for the main task view: filters, search and the task list."""

from __future__ import annotations

from datetime import date

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Footer, Header, Input, Select, Static

from smart_todo.core.controller import MainViewController, TaskStorePort
from smart_todo.core.controls import ChoiceControl
from smart_todo.errors import TaskStoreError
from smart_todo.models.config_models import AppConfig
from smart_todo.models.task import Task
from smart_todo.storage.task_store import TaskStore
from smart_todo.ui.about import AboutScreen
from smart_todo.ui.task_form import TaskFormScreen
from smart_todo.ui.widgets import TaskListItem, TaskListView
from smart_todo.utils.logger import get_logger


def parse_date_filter(text: str) -> date | None:
    """Parse the due-date filter box. Partial or invalid input means no filter."""
    text = text.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


class SmartTodoApp(App):
    """Main window: five filter inputs above the filtered task list."""

    TITLE = "Smart ToDo"
    CSS_PATH = "main_view.tcss"
    BINDINGS = [
        Binding("f2", "add_task", "Add"),
        Binding("f3", "edit_task", "Edit"),
        Binding("f6", "clear_completed", "Clear completed"),
        Binding("f7", "clear_overdue", "Clear overdue"),
        Binding("f1", "about", "About"),
        Binding("f9", "toggle_dark", "Dark/Light"),
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        store: TaskStorePort | None = None,
        config: AppConfig | None = None,
    ):
        super().__init__()
        self.app_config = config or AppConfig()
        self.store = store or TaskStore(self.app_config.storage.path)
        self.controller = MainViewController(
            self.store,
            default_completion=self.app_config.filters.default_completion,
        )
        self._render_pending = False

        self._select_controls: dict[str, ChoiceControl] = {
            "category-filter": self.controller.category_filter,
            "priority-filter": self.controller.priority_filter,
            "completion-filter": self.controller.completion_filter,
        }

    # -------------------- layout --------------------

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="filters"):
            for select_id, control in self._select_controls.items():
                yield Select(
                    [(item, item) for item in control.items],
                    value=control.value,
                    allow_blank=False,
                    id=select_id,
                )
            yield Input(placeholder="Due YYYY-MM-DD", id="date-filter")
        yield Input(placeholder="Search tasks", id="search")
        yield TaskListView(id="task-list")
        yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        if self.app_config.ui.theme in self.available_themes:
            self.theme = self.app_config.ui.theme

        for select_id, control in self._select_controls.items():
            control.add_items_listener(
                lambda _items, select_id=select_id: self._sync_select(select_id)
            )
            control.add_listener(
                lambda _old, _new, select_id=select_id: self._sync_select(select_id)
            )
        self.controller.filtered_tasks.subscribe(self._schedule_render)
        self.controller.add_redraw_listener(self._schedule_render)

        self._schedule_render()
        self.query_one(TaskListView).focus()

    def on_unmount(self) -> None:
        self.controller.close()

    # -------------------- controller -> widgets --------------------

    def _sync_select(self, select_id: str) -> None:
        control = self._select_controls[select_id]
        select = self.query_one(f"#{select_id}", Select)
        with select.prevent(Select.Changed):
            select.set_options([(item, item) for item in control.items])
            if control.value in control.items:
                select.value = control.value

    def _schedule_render(self) -> None:
        if self._render_pending:
            return
        self._render_pending = True
        self.call_later(self._render_tasks)

    async def _render_tasks(self) -> None:
        self._render_pending = False
        list_view = self.query_one(TaskListView)
        previous_index = list_view.index
        today = date.today()

        await list_view.clear()
        tasks = list(self.controller.filtered_tasks)
        await list_view.extend(TaskListItem(task, today) for task in tasks)
        if tasks:
            list_view.index = min(previous_index or 0, len(tasks) - 1)

        total = len(self.controller.tasks)
        self.query_one("#status", Static).update(
            f"Showing {len(tasks)} of {total} task(s)"
        )

    # -------------------- widgets -> controller --------------------

    @on(Select.Changed)
    def _filter_selected(self, event: Select.Changed) -> None:
        control = self._select_controls.get(event.select.id or "")
        if control is not None and isinstance(event.value, str):
            control.value = event.value

    @on(Input.Changed, "#date-filter")
    def _date_changed(self, event: Input.Changed) -> None:
        parsed = parse_date_filter(event.value)
        event.input.set_class(bool(event.value.strip()) and parsed is None, "-invalid")
        self.controller.date_filter.value = parsed

    @on(Input.Changed, "#search")
    def _search_changed(self, event: Input.Changed) -> None:
        self.controller.search_field.value = event.value

    @on(TaskListView.Selected)
    def _task_selected(self, event: TaskListView.Selected) -> None:
        if isinstance(event.item, TaskListItem):
            self._show_task_form(event.item.model)

    # -------------------- actions --------------------

    def _highlighted_task(self) -> Task | None:
        return self.query_one(TaskListView).highlighted_task

    def _show_task_form(self, task: Task | None = None) -> None:
        self.push_screen(
            TaskFormScreen(self.controller.tasks, self.store, task),
            self._task_form_closed,
        )

    def _task_form_closed(self, _saved: bool | None) -> None:
        self.controller.refresh_view()

    def _report_store_error(self, error: TaskStoreError) -> None:
        get_logger("ui").error("%s", error)
        self.notify(str(error), title="Save failed", severity="error")

    def action_add_task(self) -> None:
        self._show_task_form()

    def action_edit_task(self) -> None:
        task = self._highlighted_task()
        if task is None:
            self.notify("Select a task to edit", severity="warning")
            return
        self._show_task_form(task)

    def action_clear_completed(self) -> None:
        try:
            removed = self.controller.clear_completed()
        except TaskStoreError as e:
            self._report_store_error(e)
            return
        self.notify("Cleared completed tasks" if removed else "No completed tasks")

    def action_clear_overdue(self) -> None:
        try:
            removed = self.controller.clear_overdue()
        except TaskStoreError as e:
            self._report_store_error(e)
            return
        self.notify("Cleared overdue tasks" if removed else "No overdue tasks")

    def action_toggle_completed(self) -> None:
        task = self._highlighted_task()
        if task is None:
            return
        try:
            self.controller.toggle_completed(task)
        except TaskStoreError as e:
            self._report_store_error(e)

    def action_delete_task(self) -> None:
        task = self._highlighted_task()
        if task is None:
            return
        try:
            self.controller.delete_task(task)
        except TaskStoreError as e:
            self._report_store_error(e)

    def action_about(self) -> None:
        self.push_screen(AboutScreen())

    def action_toggle_dark(self) -> None:
        """An action to toggle dark mode."""
        self.theme = (
            "textual-dark" if self.theme == "textual-light" else "textual-light"
        )


def run_app(store: TaskStorePort | None = None, config: AppConfig | None = None) -> None:
    """Run the Smart ToDo app."""
    app = SmartTodoApp(store=store, config=config)
    app.run()
