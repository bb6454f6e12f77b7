# src/nebula/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FILE_NAME = "nebula.log"


def setup_logging(
    *,
    log_dir: str | Path = ".local/nebula",
    console_level: int = logging.WARNING,
) -> Path:
    """
    Send nebula's own records to stderr at `console_level` and everything,
    DEBUG and up, to `<log_dir>/nebula.log`. Returns the log file path.

    stdout is left alone: it carries the prompt and the replies.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.addFilter(logging.Filter("nebula"))

    file = logging.FileHandler(log_file, encoding="utf-8")
    file.setLevel(logging.DEBUG)

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    for handler in (console, file):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(logging.DEBUG)

    return log_file
