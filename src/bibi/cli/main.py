# src/bibi/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the task file), greets the user
and runs the console REPL until "bye" or EOF.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s (tasks file %s)...", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings)
    state.ui.print_welcome(registry.build_help())

    run_console_loop(state)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
