# src/todo_list/cli/main.py

"""
CLI entrypoint.

Initializes logging, validates the tasks file, then runs the console REPL
in the main thread.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state, resolve_tasks_file
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..tasks.file_check import JsonFileError, check_tasks_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-list",
        description="Todo list stored in a JSON file. Type 'help' at the prompt for commands.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="path to the tasks JSON file (default: todo-list.json)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    path = resolve_tasks_file(args.file, settings)
    logger.info("Starting %s with %s...", settings.app_name, path)

    try:
        check_tasks_file(path, max_records=settings.max_records)
    except JsonFileError as e:
        logger.info("Tasks file rejected: %s", e)
        print(f"Error: {e}")
        return 1

    state = create_initial_state(settings=settings, tasks_file=path)
    run_console_loop(state.commands)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
