"""Console and per-day file logging for scout runs."""
from __future__ import annotations

import logging
import os
import sys
from datetime import date
from pathlib import Path

LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
SCOUT_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
SCOUT_DATE_FMT = "%Y-%m-%d %H:%M:%S"

# HTTP stack chatter drowns per-site scout lines at DEBUG.
_NOISY_LOGGERS: tuple[str, ...] = ("urllib3", "charset_normalizer")

_handlers_installed = False


def get_logger(name: str) -> logging.Logger:
    """Logger for a jobhunter module; the first call wires up the root logger."""
    global _handlers_installed
    if not _handlers_installed:
        _install_handlers()
        _handlers_installed = True
    return logging.getLogger(name)


def _scout_log_file() -> Path:
    return LOG_DIR / f"scout_{date.today().isoformat()}.log"


def _install_handlers(root: logging.Logger | None = None) -> None:
    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

    root = root or logging.getLogger()
    root.setLevel(level)
    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    # pytest and embedding hosts bring their own handlers
    if root.handlers:
        return

    formatter = logging.Formatter(SCOUT_FORMAT, datefmt=SCOUT_DATE_FMT)
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(level)
    stdout_handler.setFormatter(formatter)
    root.addHandler(stdout_handler)

    if os.environ.get("JOBHUNTER_NO_LOG_FILE"):
        return
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(_scout_log_file(), encoding="utf-8")
    except OSError:
        # read-only checkout: console only
        return
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)
