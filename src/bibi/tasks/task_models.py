# src/bibi/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import ClassVar, TypeAlias


class TaskKind(StrEnum):
    """
    Tag stored in the task file and shown in rendered tasks.

    The value is the single letter used in "[T][ ] ..." style output.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


# Accepted shapes for a deadline's "/by" text. Anything else stays free text.
DEADLINE_FORMATS: tuple[tuple[str, bool], ...] = (
    ("%Y-%m-%d %H:%M", True),
    ("%Y-%m-%d %H%M", True),
    ("%Y-%m-%d", False),
    ("%d/%m/%Y %H%M", True),
    ("%d/%m/%Y", False),
)


def parse_due(text: str) -> tuple[datetime, bool] | None:
    """Return (instant, has_time) for a recognised date string, else None."""
    raw = text.strip()
    for fmt, has_time in DEADLINE_FORMATS:
        try:
            return datetime.strptime(raw, fmt), has_time
        except ValueError:
            continue
    return None


def _status_icon(is_done: bool) -> str:
    return "X" if is_done else " "


@dataclass(slots=True)
class ToDo:
    description: str
    is_done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.TODO

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_not_done(self) -> None:
        self.is_done = False

    def __str__(self) -> str:
        return f"[{self.kind}][{_status_icon(self.is_done)}] {self.description}"


@dataclass(slots=True)
class Deadline:
    """
    Task due at a point in time.

    `by` keeps exactly what the user typed so the file round-trips losslessly;
    `due` is the parsed instant when the text is in a known date format.
    """

    description: str
    by: str
    is_done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    @property
    def due(self) -> datetime | None:
        parsed = parse_due(self.by)
        return parsed[0] if parsed else None

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_not_done(self) -> None:
        self.is_done = False

    def _when(self) -> str:
        parsed = parse_due(self.by)
        if parsed is None:
            return self.by
        instant, has_time = parsed
        if has_time:
            return instant.strftime("%b %d %Y, %H:%M")
        return instant.strftime("%b %d %Y")

    def __str__(self) -> str:
        return (
            f"[{self.kind}][{_status_icon(self.is_done)}] "
            f"{self.description} (by: {self._when()})"
        )


@dataclass(slots=True)
class Event:
    description: str
    start: str
    end: str
    is_done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def mark_as_done(self) -> None:
        self.is_done = True

    def mark_as_not_done(self) -> None:
        self.is_done = False

    def __str__(self) -> str:
        return (
            f"[{self.kind}][{_status_icon(self.is_done)}] "
            f"{self.description} (from: {self.start} to: {self.end})"
        )


Task: TypeAlias = ToDo | Deadline | Event
