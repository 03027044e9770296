"""Tests for the Textual main view, driven through the pilot."""

from __future__ import annotations

from datetime import date

import pytest
from conftest import RecordingStore
from textual.widgets import Input, Select

from smart_todo.errors import TaskStoreError
from smart_todo.models.config_models import AppConfig
from smart_todo.models.filters import ALL_CATEGORIES, NOT_COMPLETED
from smart_todo.ui.about import AboutScreen
from smart_todo.ui.main_view import SmartTodoApp, parse_date_filter
from smart_todo.ui.task_form import TaskFormScreen
from smart_todo.ui.widgets import TaskListItem, TaskListView, describe_task


class FailingStore(RecordingStore):
    def save(self, tasks) -> None:
        raise TaskStoreError("Failed to save tasks: disk full")


def _shown(app: SmartTodoApp) -> list[str]:
    return [item.model.name for item in app.query_one(TaskListView).query(TaskListItem)]


# ===========================================================================
# Helpers
# ===========================================================================


class TestParseDateFilter:
    def test_iso_date(self):
        assert parse_date_filter("2024-06-01") == date(2024, 6, 1)

    @pytest.mark.parametrize("text", ["", "  ", "2024-06", "tomorrow", "2024-02-30"])
    def test_blank_or_invalid_means_no_filter(self, text):
        assert parse_date_filter(text) is None


class TestDescribeTask:
    def test_open_task(self, sample_tasks):
        line = describe_task(sample_tasks[0], date(2024, 6, 1))
        assert line.startswith("☐ Write report")
        assert "#Work" in line
        assert "P1" in line
        assert "[red]due 2024-05-31[/red]" in line

    def test_completed_task_is_struck_through(self, sample_tasks):
        line = describe_task(sample_tasks[2], date(2024, 6, 1))
        assert line.startswith("☑ [strike]Review PR[/strike]")

    def test_markup_in_names_is_escaped(self, sample_tasks):
        task = sample_tasks[3].model_copy(update={"name": "[bold]x"})
        assert "\\[bold]x" in describe_task(task, date(2024, 6, 1))


# ===========================================================================
# Startup
# ===========================================================================


@pytest.mark.asyncio
async def test_startup_shows_every_task(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert _shown(app) == ["Write report", "Call plumber", "Review PR", "Buy stamps"]
        assert app.query_one("#category-filter", Select).value == ALL_CATEGORIES


@pytest.mark.asyncio
async def test_default_completion_and_theme_from_config(recording_store):
    config = AppConfig.model_validate(
        {"ui": {"theme": "textual-light"}, "filters": {"default_completion": NOT_COMPLETED}}
    )
    app = SmartTodoApp(store=recording_store, config=config)
    async with app.run_test() as pilot:
        await pilot.pause()
        assert app.theme == "textual-light"
        assert app.query_one("#completion-filter", Select).value == NOT_COMPLETED
        assert "Review PR" not in _shown(app)


# ===========================================================================
# Filter inputs
# ===========================================================================


@pytest.mark.asyncio
async def test_select_change_filters_the_list(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        app.query_one("#category-filter", Select).value = "Home"
        await pilot.pause()
        assert app.controller.category_filter.value == "Home"
        assert _shown(app) == ["Call plumber"]


@pytest.mark.asyncio
async def test_controller_change_updates_select(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        app.controller.category_filter.value = "Work"
        await pilot.pause()
        assert app.query_one("#category-filter", Select).value == "Work"
        assert _shown(app) == ["Write report", "Review PR"]


@pytest.mark.asyncio
async def test_search_box_filters_as_you_type(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        app.query_one("#search", Input).value = "URG"
        await pilot.pause()
        assert app.controller.search_field.value == "URG"
        assert _shown(app) == ["Call plumber"]


@pytest.mark.asyncio
async def test_date_filter(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        date_input = app.query_one("#date-filter", Input)
        date_input.value = "2024-06-03"
        await pilot.pause()
        assert app.controller.date_filter.value == date(2024, 6, 3)
        assert _shown(app) == ["Buy stamps"]

        date_input.value = "2024-06"
        await pilot.pause()
        assert app.controller.date_filter.value is None
        assert date_input.has_class("-invalid")
        assert len(_shown(app)) == 4


# ===========================================================================
# Maintenance actions
# ===========================================================================


@pytest.mark.asyncio
async def test_clear_completed_key(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        await pilot.press("f6")
        await pilot.pause()
        assert _shown(app) == ["Write report", "Call plumber", "Buy stamps"]
        assert len(recording_store.saves) == 1


@pytest.mark.asyncio
async def test_clear_overdue_key(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        await pilot.press("f7")
        await pilot.pause()
        # Every dated sample task is in the past
        assert _shown(app) == ["Review PR"]
        assert app.controller.category_filter.items == [ALL_CATEGORIES, "Work"]


@pytest.mark.asyncio
async def test_store_error_is_reported_not_raised(sample_tasks, isolated_dirs):
    app = SmartTodoApp(store=FailingStore(sample_tasks))
    async with app.run_test() as pilot:
        await pilot.press("f6")
        await pilot.pause()
        assert len(app.controller.tasks) == 3
    log = (isolated_dirs / "logs" / "smart_todo.log").read_text()
    assert "disk full" in log


# ===========================================================================
# List item actions
# ===========================================================================


@pytest.mark.asyncio
async def test_space_toggles_highlighted_task(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("space")
        await pilot.pause()
        assert app.controller.tasks[0].completed is True
        assert len(recording_store.saves) == 1


@pytest.mark.asyncio
async def test_delete_removes_highlighted_task(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("delete")
        await pilot.pause()
        assert _shown(app) == ["Call plumber", "Review PR", "Buy stamps"]


# ===========================================================================
# Task form
# ===========================================================================


@pytest.mark.asyncio
async def test_add_task(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test(size=(100, 50)) as pilot:
        await pilot.press("f2")
        await pilot.pause()
        assert isinstance(app.screen, TaskFormScreen)

        app.screen.query_one("#name", Input).value = "Jog"
        app.screen.query_one("#category", Input).value = "Health"
        app.screen.query_one("#priority", Input).value = "3"
        await pilot.press("enter")
        await pilot.pause()

        assert not isinstance(app.screen, TaskFormScreen)
        assert app.controller.tasks[-1].name == "Jog"
        assert app.controller.category_filter.items[-1] == "Health"
        assert app.controller.priority_filter.items[-1] == "3"
        assert len(recording_store.saves) == 1
        assert "Jog" in _shown(app)


@pytest.mark.asyncio
async def test_edit_task_in_place_refreshes_view(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test(size=(100, 50)) as pilot:
        app.controller.category_filter.value = "Work"
        await pilot.pause()
        task = app.controller.tasks[0]

        await pilot.press("f3")
        await pilot.pause()
        app.screen.query_one("#category", Input).value = "Home"
        await pilot.press("enter")
        await pilot.pause()

        assert task.category == "Home"
        assert _shown(app) == ["Review PR"]


@pytest.mark.asyncio
async def test_invalid_form_stays_open(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test(size=(100, 50)) as pilot:
        await pilot.press("f2")
        await pilot.pause()
        app.screen.query_one("#name", Input).value = "Jog"
        app.screen.query_one("#priority", Input).value = "high"
        await pilot.press("enter")
        await pilot.pause()

        assert isinstance(app.screen, TaskFormScreen)
        assert len(app.controller.tasks) == 4
        assert recording_store.saves == []


@pytest.mark.asyncio
async def test_escape_cancels_form(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test(size=(100, 50)) as pilot:
        await pilot.press("f2")
        await pilot.pause()
        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, TaskFormScreen)
        assert recording_store.saves == []


# ===========================================================================
# About
# ===========================================================================


@pytest.mark.asyncio
async def test_about_dialog_opens_and_closes(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        await pilot.press("f1")
        await pilot.pause()
        assert isinstance(app.screen, AboutScreen)
        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, AboutScreen)


@pytest.mark.asyncio
async def test_empty_store_shows_nothing():
    app = SmartTodoApp(store=RecordingStore())
    async with app.run_test() as pilot:
        await pilot.pause()
        assert _shown(app) == []
        await pilot.press("f6")
        await pilot.press("space")
        await pilot.pause()
        assert app.controller.category_filter.items == [ALL_CATEGORIES]


@pytest.mark.asyncio
async def test_unmount_detaches_controller(recording_store):
    app = SmartTodoApp(store=recording_store)
    async with app.run_test() as pilot:
        await pilot.pause()
    app.controller.tasks.append(recording_store.tasks[0].model_copy())
    assert len(app.controller.filtered_tasks) == 4


def test_configured_store_path_expands_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = AppConfig.model_validate({"storage": {"path": "~/todo/tasks.json"}})
    app = SmartTodoApp(config=config)
    assert app.store.path == tmp_path / "todo" / "tasks.json"
