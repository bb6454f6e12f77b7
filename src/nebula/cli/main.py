# src/nebula/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task list, then runs the console REPL.
The list is written back to disk when the REPL ends.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    # A failed save raises out of here and ends the process with an error status.
    run_console_loop(state)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
