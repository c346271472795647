# tests/test_commands.py

from __future__ import annotations

from taskpad.cli.commands import UNKNOWN_COMMAND_MESSAGE, CommandRegistry, registry
from taskpad.core.errors import IllegalIndexError
from taskpad.tasks.task_list import NO_TASKS_MESSAGE


def test_command_registry_routes_and_converts_errors(state) -> None:
    reg = CommandRegistry()
    seen: list[str] = []

    def echo(state, args):
        seen.append(args)
        return f"echo {args}"

    def boom(state, args):
        raise IllegalIndexError("nope")

    reg.register("echo", echo, "echo args", aliases=["say"])
    reg.register("boom", boom, "always fails")

    assert reg.handle(state, "ECHO hello  world") == "echo hello  world"
    assert reg.handle(state, "say hi") == "echo hi"
    assert reg.handle(state, "boom") == "nope"
    assert seen == ["hello  world", "hi"]
    assert "say" not in reg.build_help()


def test_command_registry_unknown_and_blank(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "   ") is None
    assert reg.handle(state, "blah blah") == UNKNOWN_COMMAND_MESSAGE


def test_task_commands_end_to_end(state) -> None:
    assert registry.handle(state, "list") == NO_TASKS_MESSAGE

    assert "Got it" in (registry.handle(state, "todo buy milk") or "")
    assert "Got it" in (registry.handle(state, "deadline submit /by 12-05-2024 18:00") or "")
    assert "Got it" in (
        registry.handle(state, "event sync /from 01-01-2024 09:00 /to 01-01-2024 10:00") or ""
    )

    assert registry.handle(state, "mark 2") == (
        "Nice! I've marked this task as done:\n  [D][X] submit (by: 12-05-2024 18:00)"
    )
    assert (registry.handle(state, "unmark 2") or "").endswith("[D][ ] submit (by: 12-05-2024 18:00)")
    assert "removed this task" in (registry.handle(state, "delete 1") or "")
    assert (registry.handle(state, "find sync") or "").endswith("1.[E][ ] sync (from: 01-01-2024 09:00 to: 01-01-2024 10:00)")

    assert state.settings.data_file.read_text("utf-8") == (
        "[D][ ] submit (by: 12-05-2024 18:00)\n"
        "[E][ ] sync (from: 01-01-2024 09:00 to: 01-01-2024 10:00)\n"
    )

    assert "removed all tasks" in (registry.handle(state, "clear") or "")
    assert len(state.task_list) == 0


def test_task_command_errors_become_messages(state) -> None:
    assert "description cannot be empty" in (registry.handle(state, "todo") or "")
    assert "not supported" in (registry.handle(state, "deadline submit /by tomorrow") or "")
    assert "deadline format" in (registry.handle(state, "deadline submit") or "")
    assert "task number" in (registry.handle(state, "mark two") or "")
    assert "task number" in (registry.handle(state, "delete") or "")
    assert registry.handle(state, "mark 1") == NO_TASKS_MESSAGE
    assert "find <keyword>" in (registry.handle(state, "find") or "")

    registry.handle(state, "todo buy milk")
    assert "does not exist" in (registry.handle(state, "delete 5") or "")
    assert len(state.task_list) == 1


def test_deleteall_alias_and_help(state) -> None:
    registry.handle(state, "todo a")
    registry.handle(state, "DeleteAll")
    assert len(state.task_list) == 0

    help_text = registry.handle(state, "help") or ""
    for name in ("todo", "deadline", "event", "list", "mark", "unmark", "delete", "clear", "find"):
        assert f"  {name} - " in help_text
