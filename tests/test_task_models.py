# tests/test_task_models.py

from __future__ import annotations

from datetime import datetime

import pytest

from bibi.tasks.task_models import Deadline, Event, TaskKind, ToDo, parse_due


def test_new_tasks_start_not_done() -> None:
    for task in (ToDo("a"), Deadline("b", "Sunday"), Event("c", "1pm", "2pm")):
        assert task.is_done is False


def test_render_shows_kind_and_done_marker() -> None:
    todo = ToDo("read book")
    assert str(todo) == "[T][ ] read book"
    todo.mark_as_done()
    assert str(todo) == "[T][X] read book"
    todo.mark_as_not_done()
    assert str(todo) == "[T][ ] read book"

    assert str(Event("camp", "Mon", "Wed")) == "[E][ ] camp (from: Mon to: Wed)"


@pytest.mark.parametrize(
    ("by", "rendered", "due"),
    [
        ("2026-10-20", "Oct 20 2026", datetime(2026, 10, 20)),
        ("2026-10-20 1800", "Oct 20 2026, 18:00", datetime(2026, 10, 20, 18, 0)),
        ("2026-10-20 09:30", "Oct 20 2026, 09:30", datetime(2026, 10, 20, 9, 30)),
        ("2/12/2026 1800", "Dec 02 2026, 18:00", datetime(2026, 12, 2, 18, 0)),
        ("next Sunday", "next Sunday", None),
    ],
)
def test_deadline_parses_known_formats_and_keeps_free_text(by, rendered, due) -> None:
    deadline = Deadline("essay", by)

    assert str(deadline) == f"[D][ ] essay (by: {rendered})"
    assert deadline.due == due
    # The raw text is never rewritten.
    assert deadline.by == by


def test_parse_due_rejects_impossible_dates() -> None:
    assert parse_due("2026-02-30") is None


def test_kind_tags() -> None:
    assert ToDo.kind is TaskKind.TODO
    assert Deadline("a", "b").kind is TaskKind.DEADLINE
    assert Event("a", "b", "c").kind == "E"
