# src/bibi/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from ..errors import StorageError
from .task_list import TaskList
from .task_models import Deadline, Event, Task, TaskKind, ToDo

logger = logging.getLogger(__name__)


def task_to_record(task: Task) -> dict[str, Any]:
    record: dict[str, Any] = {
        "type": str(task.kind),
        "done": task.is_done,
        "description": task.description,
    }
    if isinstance(task, Deadline):
        record["by"] = task.by
    elif isinstance(task, Event):
        record["from"] = task.start
        record["to"] = task.end
    return record


def task_from_record(record: dict[str, Any]) -> Task:
    """Build a task from one decoded line. Raises ValueError/KeyError on bad input."""
    kind = TaskKind(record["type"])
    description = str(record["description"])
    done = record.get("done", False)
    if not isinstance(done, bool):
        raise ValueError(f"done flag must be true or false, got {done!r}")

    if kind is TaskKind.TODO:
        return ToDo(description, is_done=done)
    if kind is TaskKind.DEADLINE:
        return Deadline(description, str(record["by"]), is_done=done)
    return Event(description, str(record["from"]), str(record["to"]), is_done=done)


class TaskStorage:
    """
    Flat-file task store (JSON lines, one task per line, insertion order).

    - load() is best-effort per line: malformed lines are logged and skipped
    - write_to_file() rewrites the whole file via a temp file + os.replace
    """

    def __init__(self, path: str | Path = "tasks.jsonl") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskList:
        if not self._path.exists():
            logger.info("No task file at %s, starting with an empty list", self._path)
            return TaskList()

        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read tasks from {self._path}: {e}") from e

        tasks = TaskList()
        for lineno, line in enumerate(raw.splitlines(), start=1):
            if not line.strip():
                continue
            try:
                data = json.loads(line)
                if not isinstance(data, dict):
                    raise ValueError("record is not an object")
                tasks.add_task(task_from_record(data))
            except (ValueError, KeyError) as e:
                logger.warning("Skipping malformed task line %s:%d (%s)", self._path, lineno, e)

        logger.info("Loaded %d tasks from %s", tasks.get_task_count(), self._path)
        return tasks

    def write_to_file(self, tasks: TaskList) -> None:
        lines = [json.dumps(task_to_record(t), ensure_ascii=False) for t in tasks]
        body = "\n".join(lines) + ("\n" if lines else "")

        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(body, "utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Failed to save tasks to {self._path}: {e}") from e

        logger.debug("Saved %d tasks to %s", len(lines), self._path)
