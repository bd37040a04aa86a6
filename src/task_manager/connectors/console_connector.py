# src/task_manager/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..cli.views import render_summary, render_task_list
from ..core.ports import StoreChange
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("/exit", "/quit")


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    registry: CommandRegistry = command_registry,
) -> None:
    """
    Interactive REPL over the store.

    The console is a store listener: after every mutation it re-renders the
    one-line summary. `read_line`/`write` are injectable for tests.
    """
    app_name = str(getattr(state.settings, "app_name", "task-manager"))
    date_format = str(getattr(state.settings, "date_format", "%b %d, %Y"))

    def on_change(change: StoreChange) -> None:
        write(render_summary(state.store))

    unsubscribe = state.store.subscribe(on_change)
    logger.info("Console connector started.")
    write(f"[{app_name}] Type /help for commands, /exit to quit.")
    write(render_task_list(state.store, date_format))

    try:
        while True:
            try:
                user_input = read_line("> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                write("")
                break

            if not user_input:
                continue

            if user_input.lower() in EXIT_COMMANDS:
                logger.info("Console exit command received.")
                break

            try:
                response = registry.handle(state, user_input)
            except Exception:
                logger.exception("Command handler crashed.")
                response = "Internal error while handling a command."

            if response is None:
                response = "Commands start with '/'. Use /help to list available commands."
            write(response)
    finally:
        unsubscribe()

    logger.info("Console connector finished.")
