# src/taskpad/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import InvalidArgumentError, TaskpadError
from ..core.state import AppState
from ..tasks.task_models import TaskType

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_MESSAGE = "OOPS!!! I'm sorry, but I don't know what that means :-("


class CommandRegistry:
    """Keyword command registry used by the console (todo, list, mark, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a line like "mark 2".
        Returns a reply string, or None for a blank line.
        Task errors are turned into their user-facing message.
        """
        parts = line.strip().split(maxsplit=1)
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return UNKNOWN_COMMAND_MESSAGE

        try:
            return handler(state, args)
        except TaskpadError as e:
            logger.debug("Command %r rejected: %s", name, e)
            return e.message

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_index(args: str) -> int:
    raw = args.strip()
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(f"OOPS!!! Please give a task number, not {raw!r}.") from None


def _add_handler(kind: TaskType) -> CommandHandler:
    def cmd_add(state: AppState, args: str) -> str:
        if not args.strip():
            raise InvalidArgumentError("OOPS!!! The description cannot be empty.")
        return state.task_list.add(kind, args)

    return cmd_add


def cmd_help(state: AppState, args: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: str) -> str:
    return state.task_list.list_tasks()


def cmd_mark(state: AppState, args: str) -> str:
    return state.task_list.mark_as_done(_parse_index(args))


def cmd_unmark(state: AppState, args: str) -> str:
    return state.task_list.mark_as_undone(_parse_index(args))


def cmd_delete(state: AppState, args: str) -> str:
    return state.task_list.delete_task(_parse_index(args))


def cmd_clear(state: AppState, args: str) -> str:
    state.task_list.delete_all_tasks()
    return "Noted. I've removed all tasks from your list."


def cmd_find(state: AppState, args: str) -> str:
    keyword = args.strip()
    if not keyword:
        raise InvalidArgumentError("OOPS!!! Tell me what to look for: find <keyword>")
    return state.task_list.find_tasks(keyword)


registry.register("help", cmd_help, "show this help")
registry.register("list", cmd_list, "show all tasks")
registry.register("todo", _add_handler(TaskType.TODO), "todo <description>")
registry.register(
    "deadline", _add_handler(TaskType.DEADLINE), "deadline <description> /by <date> <time>"
)
registry.register(
    "event",
    _add_handler(TaskType.EVENT),
    "event <description> /from <date> <time> /to <date> <time>",
)
registry.register("mark", cmd_mark, "mark <n> - mark task n as done")
registry.register("unmark", cmd_unmark, "unmark <n> - mark task n as not done")
registry.register("delete", cmd_delete, "delete <n> - remove task n")
registry.register("clear", cmd_clear, "remove all tasks", aliases=["deleteall"])
registry.register("find", cmd_find, "find <keyword> - search task descriptions")
