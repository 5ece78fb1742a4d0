# src/todo_list/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import CommandEmitter, CommandFactory, CommandFormatError

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")


def run_console_loop(
    factory: CommandFactory,
    *,
    read_line: Callable[[], str] = input,
    emit: CommandEmitter = print,
) -> None:
    """
    Read commands one line at a time until EOF, Ctrl+C or `exit`.

    Bad input and failing commands are reported and the loop goes on.
    """
    logger.info("Console connector started.")

    while True:
        try:
            line = read_line().strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break

        if not line:
            continue

        if line.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            command = factory.create(line)
        except CommandFormatError as e:
            emit(str(e))
            continue

        try:
            command.run(emit)
        except Exception:
            logger.exception("Command handler crashed.")
            emit("Internal error while handling a command.")

    logger.info("Console connector finished.")
