# src/taskpad/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from .task_models import STORAGE_FORMAT, Deadline, Event, Task, ToDo

logger = logging.getLogger(__name__)


class MalformedLineError(ValueError):
    """A record line whose shape or payload cannot be decoded."""


class TaskStore:
    """
    Flat text file store, one record line per task:

        [T][ ] buy milk
        [D][X] submit report (by: 12-05-2024 18:00)
        [E][ ] team sync (from: 01-01-2024 09:00 to: 01-01-2024 10:00)

    - load() never raises on I/O or bad lines; it returns what it could read.
    - save() always rewrites the whole file and lets OSError propagate.
    """

    def __init__(self, path: str | Path = "data/tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_file(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        if not self._path.exists():
            self._path.touch()

    # ---- load ----

    def load(self) -> list[Task]:
        try:
            self._ensure_file()
            lines = self._path.read_text("utf-8").splitlines()
        except OSError:
            logger.exception("Failed to read task file %s, starting with an empty list", self._path)
            return []

        tasks: list[Task] = []
        for lineno, line in enumerate(lines, start=1):
            try:
                task = self._decode_line(line)
            except MalformedLineError as e:
                logger.warning("Skipping malformed task line %s:%d (%s): %r", self._path, lineno, e, line)
                continue
            if task is not None:
                tasks.append(task)

        logger.info("TaskStore loaded path=%s total=%d", self._path, len(tasks))
        return tasks

    @staticmethod
    def _decode_line(line: str) -> Task | None:
        """
        Decode one record line.

        Returns None for an unknown type letter (skipped without a warning).
        Raises MalformedLineError when the line shape or payload is broken.
        """
        parts = line.split("]", 2)
        if len(parts) < 3:
            raise MalformedLineError("expected [type][done] prefix")

        letter = parts[0][-1:]
        is_done = parts[1][1:2] == "X"
        tail = parts[2].strip()

        task: Task
        if letter == "T":
            task = ToDo(tail)
        elif letter == "D":
            description, by = _split_suffix(tail, " (by: ")
            task = Deadline(description, by=_parse_stored(by))
        elif letter == "E":
            description, when = _split_suffix(tail, " (from: ")
            start, sep, end = when.rpartition(" to: ")
            if not sep:
                raise MalformedLineError("missing ' to: ' in event")
            task = Event(description, start=_parse_stored(start), end=_parse_stored(end))
        else:
            return None

        if is_done:
            task.mark_done()
        return task

    # ---- save / delete ----

    def save(self, tasks: Iterable[Task]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = "".join(f"{task}\n" for task in tasks)

        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(data, "utf-8")
        os.replace(tmp, self._path)
        logger.debug("TaskStore saved path=%s bytes=%d", self._path, len(data))

    def delete(self) -> None:
        """Remove the backing file (full reset). Missing file is fine."""
        with contextlib.suppress(FileNotFoundError):
            self._path.unlink()
        logger.info("TaskStore deleted path=%s", self._path)


def _split_suffix(tail: str, marker: str) -> tuple[str, str]:
    description, sep, rest = tail.rpartition(marker)
    if not sep or not rest.endswith(")"):
        raise MalformedLineError(f"missing {marker.strip()!r} suffix")
    return description.strip(), rest[:-1]


def _parse_stored(raw: str) -> datetime:
    try:
        return datetime.strptime(raw, STORAGE_FORMAT)
    except ValueError as e:
        raise MalformedLineError(f"bad date-time {raw!r}") from e
