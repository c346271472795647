# src/taskpad/tasks/task_list.py

from __future__ import annotations

import logging

from ..core.errors import IllegalIndexError, InvalidArgumentError
from ..core.ports import TaskRepo
from .task_models import Task, TaskType, create_task

logger = logging.getLogger(__name__)

NO_TASKS_MESSAGE = "There are no tasks in your list."
NO_MATCHES_MESSAGE = "There are no matching tasks in your list."


def _count_line(n: int) -> str:
    noun = "task" if n == 1 else "tasks"
    return f"Now you have {n} {noun} in the list."


def _numbered(tasks: list[Task]) -> list[str]:
    return [f"{i}.{task}" for i, task in enumerate(tasks, start=1)]


class TaskList:
    """
    Ordered, in-memory task list kept in sync with a TaskRepo.

    Every successful mutation rewrites the whole store. A failed save is
    logged and the in-memory change is kept.
    """

    def __init__(self, store: TaskRepo) -> None:
        self._store = store
        self._tasks: list[Task] = store.load()

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    # ---- internals ----

    def _persist(self) -> None:
        try:
            self._store.save(self._tasks)
        except OSError:
            logger.warning("Failed to save %d task(s); changes are kept in memory only.",
                           len(self._tasks), exc_info=True)

    def _task_at(self, index: int) -> Task:
        if index < 1 or index > len(self._tasks):
            raise IllegalIndexError(
                f"OOPS!!! Task {index} does not exist. "
                f"Pick a number between 1 and {len(self._tasks)}."
                if self._tasks
                else NO_TASKS_MESSAGE
            )
        return self._tasks[index - 1]

    # ---- operations ----

    def add_task(self, command: str) -> str:
        """Add from raw command text like "deadline submit /by 12-05-2024 18:00"."""
        parts = command.strip().split(maxsplit=1)
        if not parts:
            raise InvalidArgumentError("OOPS!!! The command cannot be empty.")
        if len(parts) < 2:
            raise InvalidArgumentError("OOPS!!! The description cannot be empty.")
        return self.add(parts[0], parts[1])

    def add(self, type_token: str, details: str) -> str:
        kind = TaskType.from_token(type_token)
        task = create_task(kind, details)

        self._tasks.append(task)
        logger.debug("Added %s task #%d", kind, len(self._tasks))
        self._persist()
        return f"Got it. I've added this task:\n  {task}\n{_count_line(len(self._tasks))}"

    def list_tasks(self) -> str:
        if not self._tasks:
            return NO_TASKS_MESSAGE
        return "\n".join(["Here are the tasks in your list:", *_numbered(self._tasks)])

    def mark_as_done(self, index: int) -> str:
        task = self._task_at(index)
        task.mark_done()
        self._persist()
        return f"Nice! I've marked this task as done:\n  {task}"

    def mark_as_undone(self, index: int) -> str:
        task = self._task_at(index)
        task.mark_undone()
        self._persist()
        return f"OK, I've marked this task as not done yet:\n  {task}"

    def delete_task(self, index: int) -> str:
        self._task_at(index)
        task = self._tasks.pop(index - 1)
        self._persist()
        return f"Noted. I've removed this task:\n  {task}\n{_count_line(len(self._tasks))}"

    def delete_all_tasks(self) -> None:
        self._tasks.clear()
        self._persist()

    def find_tasks(self, keyword: str) -> str:
        if not self._tasks:
            return NO_TASKS_MESSAGE
        matches = [t for t in self._tasks if keyword in t.description]
        if not matches:
            return NO_MATCHES_MESSAGE
        return "\n".join(["Here are the matching tasks in your list:", *_numbered(matches)])
