# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (restoring stored tasks), then runs the
console REPL in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import PersistenceError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(log_dir=settings.data_dir, file_level=file_level)

    logger.info("Starting %s (storage=%s)...", settings.app_name, settings.storage_backend)

    try:
        state = create_initial_state(settings=settings)
    except PersistenceError as e:
        # Do not start on top of unreadable data: the first save would overwrite it.
        logger.error("Cannot load stored tasks: %s", e)
        print(
            f"Stored tasks could not be read ({e}).\n"
            f"Nothing was changed. Fix or move the stored data, then restart. Log: {log_file}",
            file=sys.stderr,
        )
        return 1

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
