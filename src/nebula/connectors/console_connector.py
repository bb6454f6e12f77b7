# src/nebula/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli import messages
from ..cli.bootstrap import save_tasks
from ..cli.commands import registry as command_registry
from ..cli.parser import CommandKind, parse_command
from ..core.errors import NebulaError
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Read commands until `bye` or end of input, then save the task list.

    One line is parsed and applied completely before the next one is read.
    A line that fails validation prints its message and changes nothing.
    Save errors propagate to the caller.
    """
    app_name = str(getattr(state.settings, "app_name", "Nebula"))
    logger.info("Console connector started (tasks=%d).", len(state.tasks))
    write(messages.greeting(app_name))

    while True:
        try:
            line = read_line()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        try:
            command = parse_command(line, len(state.tasks))
        except NebulaError as e:
            logger.debug("Rejected input %r: %s", line, e)
            write(e.message)
            continue

        try:
            reply = command_registry.handle(state, command)
        except NebulaError as e:
            write(e.message)
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            write(messages.internal_error())
            continue

        write(reply)

        if command.kind is CommandKind.BYE:
            logger.info("Console exit command received.")
            break

    save_tasks(state)
    logger.info("Console connector finished.")
