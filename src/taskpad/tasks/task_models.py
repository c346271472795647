# src/taskpad/tasks/task_models.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import ClassVar

from ..core.errors import InvalidArgumentError

# Persisted data and all rendering use this single format.
STORAGE_FORMAT = "%d-%m-%Y %H:%M"

# Tried in order when parsing user input.
INPUT_FORMATS: tuple[str, ...] = (
    "%d-%m-%Y %H:%M",
    "%Y-%m-%d %H:%M",
    "%d-%b-%Y %H:%M",
)


def parse_datetime(text: str) -> datetime:
    raw = text.strip()
    for fmt in INPUT_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue
    raise InvalidArgumentError(
        f"OOPS!!! Your date-time format is not supported: {raw!r}. "
        "Use DD-MM-YYYY HH:mm, YYYY-MM-DD HH:mm or DD-Mon-YYYY HH:mm."
    )


def format_datetime(value: datetime) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d} {value.hour:02d}:{value.minute:02d}"


class TaskType(StrEnum):
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"

    @property
    def letter(self) -> str:
        return _LETTERS[self]

    @classmethod
    def from_token(cls, token: str) -> TaskType:
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise InvalidArgumentError(f"OOPS!!! Your task type is unknown: {token}") from None


_LETTERS = {
    TaskType.TODO: "T",
    TaskType.DEADLINE: "D",
    TaskType.EVENT: "E",
}


@dataclass(slots=True)
class Task:
    """
    Common part of every task.

    Notes:
    - `is_done` always starts False for newly created tasks;
      the store restores it through mark_done() on load.
    - Equality compares variant, description, flag and timestamps.
    """

    kind: ClassVar[TaskType]

    description: str
    is_done: bool = field(default=False, kw_only=True)

    def mark_done(self) -> None:
        self.is_done = True

    def mark_undone(self) -> None:
        self.is_done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    def _suffix(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"[{self.kind.letter}][{self.status_icon}] {self.description}{self._suffix()}"


@dataclass(slots=True)
class ToDo(Task):
    kind: ClassVar[TaskType] = TaskType.TODO


@dataclass(slots=True)
class Deadline(Task):
    kind: ClassVar[TaskType] = TaskType.DEADLINE

    by: datetime

    def _suffix(self) -> str:
        return f" (by: {format_datetime(self.by)})"


@dataclass(slots=True)
class Event(Task):
    kind: ClassVar[TaskType] = TaskType.EVENT

    # No ordering check: an end before the start is stored as given.
    start: datetime
    end: datetime

    def _suffix(self) -> str:
        return f" (from: {format_datetime(self.start)} to: {format_datetime(self.end)})"


def _require_description(text: str) -> str:
    description = text.strip()
    if not description:
        raise InvalidArgumentError("OOPS!!! The description cannot be empty.")
    if description.splitlines() != [description]:
        # One task per record line.
        raise InvalidArgumentError("OOPS!!! The description must fit on a single line.")
    return description


def _build_todo(details: str) -> Task:
    return ToDo(_require_description(details))


def _build_deadline(details: str) -> Task:
    parts = details.split(" /by ")
    if len(parts) != 2:
        raise InvalidArgumentError(
            "OOPS!!! The deadline format is incorrect. "
            "It should be: deadline <name> /by <date> <time>"
        )
    name, by = parts
    return Deadline(_require_description(name), by=parse_datetime(by))


def _build_event(details: str) -> Task:
    first = details.split(" /from ")
    second = first[-1].split(" /to ")
    if len(first) != 2 or len(second) != 2:
        raise InvalidArgumentError(
            "OOPS!!! The event format is incorrect. "
            "It should be: event <name> /from <date> <time> /to <date> <time>"
        )
    name = first[0]
    start, end = second
    return Event(
        _require_description(name),
        start=parse_datetime(start),
        end=parse_datetime(end),
    )


_BUILDERS: dict[TaskType, Callable[[str], Task]] = {
    TaskType.TODO: _build_todo,
    TaskType.DEADLINE: _build_deadline,
    TaskType.EVENT: _build_event,
}


def create_task(kind: TaskType, details: str) -> Task:
    """Build a new (not done) task of `kind` from free-text details."""
    return _BUILDERS[kind](details)
