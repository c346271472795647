# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("bye", "exit", "quit")
DIVIDER = "_" * 60


def _print_block(text: str) -> None:
    print(DIVIDER)
    for line in text.splitlines():
        print(f" {line}")
    print(DIVIDER)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.task_list))
    app_name = str(getattr(state.settings, "app_name", "taskpad"))

    _print_block(f"Hello! I'm {app_name}\nWhat can I do for you? (type 'help' for commands)")

    while True:
        try:
            user_input = input().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            _print_block(reply)

    _print_block("Bye. Hope to see you again soon!")
    logger.info("Console connector finished.")
