"""Logging for WikiGrep.

Library modules log through ``log``; only the CLI calls
`configure_logging`, once per command. Lines look like::

    10-17 14:02:09 [WARN] page fetch failed: welcome-visitors
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

LOGGER_NAME = "WikiGrep"

log = logging.getLogger(LOGGER_NAME)

_TAGS = {"DEBUG": "DEBG", "WARNING": "WARN", "ERROR": "ERRO", "CRITICAL": "ERRO"}


class _TagFormatter(logging.Formatter):
    """Formatter exposing a four-letter ``%(tag)s`` for the record level."""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s [%(tag)s] %(message)s", datefmt="%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:  # noqa: A003
        record.tag = _TAGS.get(record.levelname, record.levelname[:4])
        return super().format(record)


def _log_file(log_dir: str, action: str) -> Path:
    folder = Path(log_dir or "log") / action
    folder.mkdir(parents=True, exist_ok=True)
    return folder / f"{action}_{datetime.now():%m%d%H%M%S}.log"


def _build_handlers(level: int, action: str | None, log_to_file: bool, log_dir: str) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setLevel(level)
    handlers: list[logging.Handler] = [console]
    if log_to_file and action:
        # The file keeps everything, whatever the console level.
        mirror = logging.FileHandler(_log_file(log_dir, action), encoding="utf-8")
        mirror.setLevel(logging.DEBUG)
        handlers.append(mirror)
    formatter = _TagFormatter()
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(
    *,
    level: str = "INFO",
    action: str | None = None,
    log_to_file: bool = False,
    log_dir: str = "log",
) -> None:
    """Replace the handlers of the WikiGrep logger.

    Args:
        level: Console level name; unknown names fall back to INFO.
        action: CLI command name; names the log file and its folder.
        log_to_file: Also write ``<log_dir>/<action>/<action>_<stamp>.log``.
        log_dir: Base directory for log files.
    """
    console_level = logging.getLevelName((level or "INFO").upper())
    if not isinstance(console_level, int):
        console_level = logging.INFO

    log.handlers.clear()
    for handler in _build_handlers(console_level, action, log_to_file, log_dir):
        log.addHandler(handler)
    log.setLevel(min(logging.DEBUG, console_level))
    log.propagate = False
