# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..presentation.render import render_view

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def run_console_loop(
    state: AppState,
    *,
    registry: CommandRegistry = command_registry,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> None:
    """
    Read commands until /exit or EOF. Each command runs to completion
    (mutate, persist, render) before the next line is read.
    """
    logger.info("Console connector started (tasks=%s).", state.task_store.count())
    locale = str(getattr(state.settings, "locale", "en") or "en")

    output_fn(render_view(state.current_view(), locale))
    output_fn("\nType /help for commands, /exit to quit.")

    while True:
        try:
            line = input_fn("taskboard> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output_fn("")
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        if not line.startswith("/"):
            output_fn("Commands start with '/'. Use /help to list available commands.")
            continue

        try:
            reply = registry.handle(state, line, emit=output_fn)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            output_fn(reply)

    logger.info("Console connector finished.")
