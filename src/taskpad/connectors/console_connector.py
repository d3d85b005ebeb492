# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import add_task, registry as command_registry, update_task
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Turn one line of console input into a reply.

    Commands go through the registry. Plain text adds a task, or, while a
    task is being edited, becomes its new text. Returns None for blank input.
    """
    if not line.strip():
        return None

    try:
        reply = command_registry.handle(state, line.strip())
        if reply is not None:
            return reply
        if state.edit.active:
            return update_task(state, line)
        return add_task(state, line)
    except Exception:
        # Storage write failures land here too; the store does not retry.
        logger.exception("Command handler crashed.")
        return "Internal error while handling the command (see log for details)."


def run_console_loop(state: AppState, *, input_fn: Callable[[str], str] = input) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.task_store.tasks))
    _print_ts("[CONSOLE] Type a task to add it. Use /help for commands. Use /exit to quit.")
    print(command_registry.handle(state, "/list"))

    while True:
        prompt = f"edit #{state.edit.task_id}> " if state.edit.active else "> "
        try:
            user_input = input_fn(prompt)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.strip().lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
