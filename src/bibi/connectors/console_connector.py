# src/bibi/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import parse_command
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState) -> None:
    """
    Read one command per line from stdin and execute it against state.tasks.

    Stops after "bye", on EOF or on Ctrl+C. Every command finishes (including its
    file write) before the next line is read.
    """
    logger.info("Console connector started (tasks=%d).", state.tasks.get_task_count())

    while True:
        try:
            line = input()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line.strip():
            continue

        command = parse_command(line)
        try:
            command.execute(state.tasks, state.ui, state.storage)
        except Exception:
            logger.exception("Command handler crashed: %r", command)
            state.ui.print_error("Internal error while handling a command.")
            continue

        if command.is_exit():
            logger.info("Exit command received.")
            break

    logger.info("Console connector finished.")
