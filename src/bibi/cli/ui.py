# src/bibi/cli/ui.py

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from ..tasks.task_list import TaskList
from ..tasks.task_models import Task

HORIZONTAL_LINE = "    " + "_" * 60
INDENT = "     "


class Ui:
    """
    Console renderer for every command outcome.

    Writes to `out` when given, otherwise to whatever sys.stdout is at call time
    (so pytest's capsys and redirected stdout both work).
    """

    def __init__(self, out: TextIO | None = None, app_name: str = "bibi") -> None:
        self._out = out
        self._app_name = app_name

    def _print(self, text: str = "") -> None:
        print(text, file=self._out if self._out is not None else sys.stdout)

    def _say(self, *lines: str) -> None:
        for line in lines:
            self._print(f"{INDENT}{line}")

    def print_horizontal_line(self) -> None:
        self._print(HORIZONTAL_LINE)

    def print_welcome(self, help_lines: Iterable[str] = ()) -> None:
        self.print_horizontal_line()
        self._say(f"Hello! I'm {self._app_name}.", "What can I do for you?")
        help_lines = list(help_lines)
        if help_lines:
            self._say("", "Commands:", *(f"  {line}" for line in help_lines))
        self.print_horizontal_line()

    def print_exit_message(self) -> None:
        self.print_horizontal_line()
        self._say("Bye. Hope to see you again soon!")
        self.print_horizontal_line()

    def print_list_message(self, tasks: TaskList) -> None:
        self.print_horizontal_line()
        if tasks.get_task_count() == 0:
            self._say("Your list is empty.")
        else:
            self._say("Here are the tasks in your list:")
            for i, task in enumerate(tasks, start=1):
                self._say(f"{i}.{task}")
        self.print_horizontal_line()

    def print_task_added_message(self, task: Task, count: int) -> None:
        self._say("Got it. I've added this task:", f"  {task}", _count_line(count))

    def print_task_removed_message(self, task: Task, count: int) -> None:
        self._say("Noted. I've removed this task:", f"  {task}", _count_line(count))

    def print_task_marked_message(self, task: Task) -> None:
        self._say("Nice! I've marked this task as done:", f"  {task}")

    def print_task_unmarked_message(self, task: Task) -> None:
        self._say("OK, I've marked this task as not done yet:", f"  {task}")

    def print_invalid_syntax_message(self, hint: str) -> None:
        self._say(f"Invalid syntax. {hint}")

    def print_invalid_index_message(self) -> None:
        self._say("Invalid task index")

    def print_find_results(self, matches: Iterable[tuple[int, Task]]) -> None:
        matches = list(matches)
        if not matches:
            self._say("No matching tasks found. Paranoid?")
            return
        self._say("Here are the matching tasks I found:")
        for i, task in matches:
            self._say(f"{i}: {task}")

    def print_unknown_command_message(self, keyword: str) -> None:
        self.print_horizontal_line()
        self._say(f"Sorry, I don't know what \"{keyword}\" means :-(")
        self.print_horizontal_line()

    def print_error(self, message: str) -> None:
        self._say(message)


def _count_line(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."
