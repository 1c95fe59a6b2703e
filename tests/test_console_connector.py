# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterable

import pytest

from bibi.connectors import console_connector
from bibi.connectors.console_connector import run_console_loop


def feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str], end: type[BaseException] = EOFError) -> list[str]:
    """Patch input() to return `lines`, then raise `end`; returns what was consumed."""
    pending = list(lines)
    consumed: list[str] = []

    def fake_input(prompt: str = "") -> str:
        if not pending:
            raise end()
        line = pending.pop(0)
        consumed.append(line)
        return line

    monkeypatch.setattr("builtins.input", fake_input)
    return consumed


def test_loop_runs_commands_until_bye(monkeypatch, state, out) -> None:
    consumed = feed(monkeypatch, ["todo one", "", "   ", "deadline two /by Sunday", "bye", "todo never"])

    run_console_loop(state)

    assert consumed == ["todo one", "", "   ", "deadline two /by Sunday", "bye"]
    assert [t.description for t in state.tasks] == ["one", "two"]
    assert "Bye" in out.getvalue()
    # todo, deadline and bye each persist once.
    assert state.storage.writes == 3


def test_loop_stops_on_eof(monkeypatch, state) -> None:
    feed(monkeypatch, ["todo one"])

    run_console_loop(state)

    assert state.tasks.get_task_count() == 1


def test_loop_stops_on_keyboard_interrupt(monkeypatch, state) -> None:
    feed(monkeypatch, ["todo one"], end=KeyboardInterrupt)

    run_console_loop(state)

    assert state.tasks.get_task_count() == 1


def test_loop_survives_a_crashing_command(monkeypatch, state, out) -> None:
    feed(monkeypatch, ["boom", "todo after"])

    real_parse = console_connector.parse_command

    class Exploding:
        def execute(self, tasks, ui, storage):
            raise RuntimeError("kaboom")

        def is_exit(self) -> bool:
            return False

    def parse(line: str):
        return Exploding() if line == "boom" else real_parse(line)

    monkeypatch.setattr(console_connector, "parse_command", parse)

    run_console_loop(state)

    assert "Internal error while handling a command." in out.getvalue()
    assert [t.description for t in state.tasks] == ["after"]
