# src/taskpad/core/errors.py

"""Error kinds surfaced to the user as a rejected command."""

from __future__ import annotations


class TaskpadError(Exception):
    """Base error. `str(err)` is the user-facing message."""

    default_message = "OOPS!!! Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidArgumentError(TaskpadError):
    """Malformed command text, unknown task type or unparseable date-time."""

    default_message = "OOPS!!! The command arguments are invalid."


class IllegalIndexError(TaskpadError):
    """Task index outside [1, size]."""

    default_message = "OOPS!!! That task number does not exist in your list."
