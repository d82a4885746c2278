# src/taskboard/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


# Console floor per logger prefix; the most specific prefix wins.
# Storage chatter (ready/saved/loaded) and command rejections already show up
# in the board or the command reply, so the console only gets their problems.
_CONSOLE_FLOORS: dict[str, int] = {
    "taskboard": logging.NOTSET,
    "taskboard.storage": logging.WARNING,
    "taskboard.cli.commands": logging.WARNING,
    "py.warnings": logging.ERROR,
}


def _console_floor(name: str) -> int:
    best = ""
    for prefix in _CONSOLE_FLOORS:
        if (name == prefix or name.startswith(prefix + ".")) and len(prefix) > len(best):
            best = prefix
    # Anything not listed is third-party: errors only.
    return _CONSOLE_FLOORS[best] if best else logging.ERROR


class _ConsoleNoiseFilter(logging.Filter):
    """Keep the console readable while the board is printed on stdout."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= _console_floor(record.name)


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskboard",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure logging with:
    - Console handler: filtered, stderr (stdout is the task board itself)
    - File handler: full logs for debugging

    Call this ONCE, very early (before first logger.info). Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "taskboard.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
