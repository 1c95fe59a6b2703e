# src/bibi/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..cli.ui import Ui
from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so connectors can read app_name etc.
    settings: object

    tasks: TaskList
    ui: Ui
    storage: TaskRepo
