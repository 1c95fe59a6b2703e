# src/bibi/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_models import Task


class TaskList:
    """
    Ordered in-memory collection of tasks for the current session.

    Tasks have no persistent id: "task #3" is simply the third element in the
    current order, so removing a task renumbers everything after it.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def get_task(self, index: int) -> Task:
        """0-based access; raises IndexError like a plain list."""
        return self._tasks[index]

    def add_task(self, task: Task) -> None:
        self._tasks.append(task)

    def remove_task(self, index: int) -> Task | None:
        """Remove the task at 1-based `index`; None when outside [1, count]."""
        if index < 1 or index > len(self._tasks):
            return None
        return self._tasks.pop(index - 1)

    def get_task_count(self) -> int:
        return len(self._tasks)

    def find(self, pattern: str) -> list[tuple[int, Task]]:
        """(1-based index, task) for every description containing `pattern`."""
        return [
            (i, task)
            for i, task in enumerate(self._tasks, start=1)
            if pattern in task.description
        ]

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)
