# src/bibi/core/ports.py

"""
Ports (interfaces) used by the command layer.

Commands depend on these Protocols instead of concrete classes so storage can be
swapped for an in-memory fake in tests.
"""

from __future__ import annotations

from typing import Protocol

from ..tasks.task_list import TaskList


class TaskRepo(Protocol):
    """Persists the whole task list; raises StorageError on failure."""

    def load(self) -> TaskList: ...
    def write_to_file(self, tasks: TaskList) -> None: ...
