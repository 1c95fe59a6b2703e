# src/bibi/errors.py

"""Exceptions raised by the command layer and storage."""

from __future__ import annotations


class BibiError(Exception):
    """Base class for all bibi errors."""


class CommandSyntaxError(BibiError):
    """Argument string does not match the shape a command expects."""

    def __init__(self, usage: str) -> None:
        super().__init__(usage)
        self.usage = usage


class TaskIndexError(BibiError):
    """Syntactically valid index that points outside the task list."""

    def __init__(self, index: int | str, count: int) -> None:
        super().__init__(f"Task index {index} is out of range 1..{count}")
        self.index = index
        self.count = count


class StorageError(BibiError):
    """Reading or writing the task file failed."""
