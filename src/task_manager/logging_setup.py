# src/task_manager/logging_setup.py

"""
Logging for the task manager.

The REPL prompt and log output share one terminal, so stderr only carries the
app's own records (at the configured level) and other libraries' errors. The
optional log file under the data directory gets everything at DEBUG, which is
where store mutations and listener failures end up.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "task_manager"
LOG_FILE_NAME = "task_manager.log"

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _ConsoleNoiseFilter(logging.Filter):
    """Pass task_manager.* records; anything else (py.warnings included) needs ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path | None = ".local/task_manager",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path | None:
    """
    Replace the root handlers with a filtered stderr handler and, unless
    `log_dir` is None, a file handler writing `LOG_FILE_NAME` there.

    Returns the log file path, or None when logging to console only.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console)

    log_file: Path | None = None
    if log_dir is not None:
        log_file = Path(log_dir) / LOG_FILE_NAME
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    # warnings.warn(...) arrives as 'py.warnings'.
    logging.captureWarnings(True)
    return log_file
