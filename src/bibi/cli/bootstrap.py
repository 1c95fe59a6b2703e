# src/bibi/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires TaskStorage, the loaded TaskList and Ui into AppState.
"""

from __future__ import annotations

import logging
from typing import TextIO

from ..config import get_settings
from ..core.state import AppState
from ..errors import StorageError
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStorage
from .ui import Ui

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, out: TextIO | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings(). A task file that cannot be
    read is reported and the session starts with an empty list.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    ui = Ui(out=out, app_name=str(getattr(settings, "app_name", "bibi")))
    storage = TaskStorage(settings.tasks_path)

    try:
        tasks = storage.load()
    except StorageError as e:
        logger.error("Could not load tasks: %s", e)
        ui.print_error(str(e))
        tasks = TaskList()

    return AppState(settings=settings, tasks=tasks, ui=ui, storage=storage)
