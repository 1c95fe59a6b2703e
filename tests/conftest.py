# tests/conftest.py

from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace

import pytest

from bibi.cli.ui import Ui
from bibi.core.state import AppState
from bibi.tasks.task_list import TaskList
from bibi.tasks.task_models import Deadline, Event, ToDo
from bibi.tasks.task_store import TaskStorage

from .fakes import FakeStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and main.

    A SimpleNamespace instead of the real config keeps tests isolated from the
    environment and any local .env file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="bibi",
        log_level="WARNING",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.jsonl",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def ui(out: io.StringIO) -> Ui:
    return Ui(out=out)


@pytest.fixture()
def tasks() -> TaskList:
    return TaskList()


@pytest.fixture()
def sample_tasks() -> TaskList:
    return TaskList(
        [
            ToDo("buy milk"),
            Deadline("return book", "2026-10-20"),
            Event("project meeting", "Mon 2pm", "4pm"),
        ]
    )


@pytest.fixture()
def fake_storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture()
def storage(settings: SimpleNamespace) -> TaskStorage:
    return TaskStorage(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, ui: Ui, tasks: TaskList, fake_storage: FakeStorage) -> AppState:
    """AppState wired with an in-memory storage fake."""
    return AppState(settings=settings, tasks=tasks, ui=ui, storage=fake_storage)
