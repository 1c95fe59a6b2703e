# src/bibi/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ..core.ports import TaskRepo
from ..errors import CommandSyntaxError, StorageError, TaskIndexError
from ..tasks.task_list import TaskList
from ..tasks.task_models import Deadline, Event, Task, ToDo
from .ui import Ui

CommandValidator = Callable[[str], Any]
CommandApplier = Callable[[Any, TaskList, Ui], None]

EXIT_KEYWORD = "bye"

INDEX_RE = re.compile(r"\d+", re.ASCII)
DEADLINE_RE = re.compile(r"(?P<description>.+?) /by (?P<by>.+)")
EVENT_RE = re.compile(r"(?P<description>.+?) /from (?P<start>.+?) /to (?P<end>.+)")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandSpec:
    """
    One dispatch-table entry.

    validate(args) -> parsed value, or raises CommandSyntaxError
    apply(parsed, tasks, ui) -> performs the action, may raise TaskIndexError
    """

    name: str
    validate: CommandValidator
    apply: CommandApplier
    help_text: str
    persists: bool = True
    framed: bool = True


class CommandRegistry:
    """Keyword -> CommandSpec table used by Command.execute."""

    def __init__(self) -> None:
        self._specs: dict[str, CommandSpec] = {}

    def register(
        self,
        name: str,
        validate: CommandValidator,
        apply: CommandApplier,
        help_text: str,
        *,
        persists: bool = True,
        framed: bool = True,
    ) -> None:
        self._specs[name] = CommandSpec(
            name=name,
            validate=validate,
            apply=apply,
            help_text=help_text,
            persists=persists,
            framed=framed,
        )

    def get(self, name: str) -> CommandSpec | None:
        return self._specs.get(name)

    def build_help(self) -> list[str]:
        return [f"{name} - {spec.help_text}" for name, spec in self._specs.items()]


registry = CommandRegistry()


class Command:
    """A keyword plus its (already trimmed) argument string."""

    def __init__(
        self,
        keyword: str,
        args: str = "",
        *,
        commands: CommandRegistry | None = None,
    ) -> None:
        self.keyword = keyword
        self.args = args
        self._commands = commands

    def __repr__(self) -> str:
        return f"Command(keyword={self.keyword!r}, args={self.args!r})"

    def is_exit(self) -> bool:
        return self.keyword == EXIT_KEYWORD

    def execute(self, tasks: TaskList, ui: Ui, storage: TaskRepo) -> None:
        commands = self._commands if self._commands is not None else registry
        spec = commands.get(self.keyword)
        if spec is None:
            logger.debug("Unknown command keyword=%r", self.keyword)
            ui.print_unknown_command_message(self.keyword)
            return

        logger.debug("Executing %s args=%r", spec.name, self.args)

        if spec.framed:
            ui.print_horizontal_line()
        try:
            parsed = spec.validate(self.args)
            spec.apply(parsed, tasks, ui)
        except CommandSyntaxError as e:
            ui.print_invalid_syntax_message(e.usage)
        except TaskIndexError as e:
            logger.debug("%s", e)
            ui.print_invalid_index_message()
        if spec.framed:
            ui.print_horizontal_line()

        # Persist even when the command was rejected; the unchanged list is rewritten.
        if spec.persists:
            try:
                storage.write_to_file(tasks)
            except StorageError as e:
                logger.error("Failed to persist tasks after %r: %s", spec.name, e)
                ui.print_error(str(e))


def parse_command(line: str, *, commands: CommandRegistry | None = None) -> Command:
    """Split "keyword rest of line" into a Command; the argument string is trimmed."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return Command("", "", commands=commands)
    keyword = parts[0]
    args = parts[1].strip() if len(parts) > 1 else ""
    return Command(keyword, args, commands=commands)


# ---- validators ----


def _no_args(args: str) -> None:
    return None


def _index_validator(usage: str) -> CommandValidator:
    def validate(args: str) -> str:
        if not INDEX_RE.fullmatch(args):
            raise CommandSyntaxError(usage)
        return args

    return validate


def _validate_todo(args: str) -> str:
    description = args.strip()
    if not description:
        raise CommandSyntaxError('Please use "todo <description>"')
    return description


def _validate_deadline(args: str) -> tuple[str, str]:
    usage = 'Please use "deadline <description> /by <deadline>"'
    m = DEADLINE_RE.fullmatch(args)
    if not m:
        raise CommandSyntaxError(usage)
    description, by = m["description"].strip(), m["by"].strip()
    if not description or not by:
        raise CommandSyntaxError(usage)
    return description, by


def _validate_event(args: str) -> tuple[str, str, str]:
    usage = 'Please use "event <description> /from <time> /to <time>"'
    m = EVENT_RE.fullmatch(args)
    if not m:
        raise CommandSyntaxError(usage)
    description, start, end = m["description"].strip(), m["start"].strip(), m["end"].strip()
    if not description or not start or not end:
        raise CommandSyntaxError(usage)
    return description, start, end


def _validate_pattern(args: str) -> str:
    if not args:
        raise CommandSyntaxError('Please use "find <pattern>"')
    return args


# ---- actions ----


def _to_index(digits: str, count: int) -> int:
    """Convert an all-digit argument; anything longer than `count` is out of range."""
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(count)):
        raise TaskIndexError(digits, count)
    return int(significant)


def _task_at(tasks: TaskList, digits: str) -> Task:
    count = tasks.get_task_count()
    index = _to_index(digits, count)
    if index < 1 or index > count:
        raise TaskIndexError(index, count)
    return tasks.get_task(index - 1)


def _add(task: Task, tasks: TaskList, ui: Ui) -> None:
    tasks.add_task(task)
    ui.print_task_added_message(task, tasks.get_task_count())


def cmd_bye(_: None, tasks: TaskList, ui: Ui) -> None:
    ui.print_exit_message()


def cmd_list(_: None, tasks: TaskList, ui: Ui) -> None:
    ui.print_list_message(tasks)


def cmd_mark(digits: str, tasks: TaskList, ui: Ui) -> None:
    task = _task_at(tasks, digits)
    task.mark_as_done()
    ui.print_task_marked_message(task)


def cmd_unmark(digits: str, tasks: TaskList, ui: Ui) -> None:
    task = _task_at(tasks, digits)
    task.mark_as_not_done()
    ui.print_task_unmarked_message(task)


def cmd_todo(description: str, tasks: TaskList, ui: Ui) -> None:
    _add(ToDo(description), tasks, ui)


def cmd_deadline(parsed: tuple[str, str], tasks: TaskList, ui: Ui) -> None:
    description, by = parsed
    _add(Deadline(description, by), tasks, ui)


def cmd_event(parsed: tuple[str, str, str], tasks: TaskList, ui: Ui) -> None:
    description, start, end = parsed
    _add(Event(description, start, end), tasks, ui)


def cmd_remove(digits: str, tasks: TaskList, ui: Ui) -> None:
    index = _to_index(digits, tasks.get_task_count())
    task = tasks.remove_task(index)
    if task is None:
        raise TaskIndexError(index, tasks.get_task_count())
    ui.print_task_removed_message(task, tasks.get_task_count())


def cmd_find(pattern: str, tasks: TaskList, ui: Ui) -> None:
    ui.print_find_results(tasks.find(pattern))


registry.register(
    "bye", _no_args, cmd_bye, help_text="Save and exit.", framed=False
)
registry.register(
    "list", _no_args, cmd_list, help_text="Show all tasks.", persists=False, framed=False
)
registry.register(
    "mark", _index_validator('Please use "mark <int>"'), cmd_mark, help_text="Mark task as done."
)
registry.register(
    "unmark",
    _index_validator('Please use "unmark <int>"'),
    cmd_unmark,
    help_text="Mark task as not done.",
)
registry.register("todo", _validate_todo, cmd_todo, help_text="Add a todo.")
registry.register("deadline", _validate_deadline, cmd_deadline, help_text="Add a deadline.")
registry.register("event", _validate_event, cmd_event, help_text="Add an event.")
registry.register(
    "remove", _index_validator('Please use "remove <index>"'), cmd_remove, help_text="Delete a task."
)
registry.register(
    "find", _validate_pattern, cmd_find, help_text="Search descriptions.", persists=False
)
