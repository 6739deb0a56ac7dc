"""BookFinder logging.

One package logger, ``log``, is shared by every module. The CLI configures
it once per run; library callers may leave it alone and attach their own
handlers.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Final

LEVEL_NAMES: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

_ABBREV: Final[dict[int, str]] = {
    logging.DEBUG: "DEBG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERRO",
    logging.CRITICAL: "ERRO",
}
_FORMAT: Final[str] = "%(asctime)s [%(levelabbr)s] %(message)s"
_DATEFMT: Final[str] = "%m-%d %H:%M:%S"

log = logging.getLogger("BookFinder")


class _AbbrevLevelFormatter(logging.Formatter):
    """Render levels as four-letter tags (DEBG/INFO/WARN/ERRO)."""

    def __init__(self) -> None:
        super().__init__(fmt=_FORMAT, datefmt=_DATEFMT)

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003 - record is stdlib name
        record.levelabbr = _ABBREV.get(record.levelno, record.levelname[:4])
        return super().format(record)


def log_file_path(log_dir: str, action: str, *, now: datetime | None = None) -> Path:
    """Return ``<log_dir>/<action>/<action>_<mmddHHMMSS>.log``."""
    stamp = (now or datetime.now()).strftime("%m%d%H%M%S")
    return Path(log_dir or "log") / action / f"{action}_{stamp}.log"


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Route the package logger to stderr and, optionally, a per-run file.

    The console handler honours ``level``. The file handler always records
    DEBUG so a run can be inspected afterwards.

    Args:
        level: Console level name (e.g. INFO, DEBUG). Unknown names mean INFO.
        action: CLI command name; selects the log file location.
        log_to_file: Whether to mirror records to a file.
        log_dir: Base directory for log files.
    """
    console_level = logging.getLevelName((level or "INFO").upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO
    formatter = _AbbrevLevelFormatter()

    reset_logging()
    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(formatter)
    log.addHandler(console)

    threshold = console_level
    if log_to_file and action:
        path = log_file_path(log_dir, action)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)
        threshold = logging.DEBUG

    log.setLevel(threshold)
    log.propagate = False


def reset_logging() -> None:
    """Detach and close handlers installed by ``configure_logging``."""
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    log.setLevel(logging.NOTSET)
    log.propagate = True
