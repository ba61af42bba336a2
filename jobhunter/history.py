"""Read-only view of the application log (data/applications.json)."""
from __future__ import annotations

import fcntl
import json
from pathlib import Path

from jobhunter.config import applications_log_path
from jobhunter.log import get_logger
from jobhunter.models import ApplicationEntry

log = get_logger(__name__)


def _lock_shared(f) -> None:
    """Advisory shared lock (Unix fcntl); the log writer takes LOCK_EX."""
    try:
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)
    except (OSError, AttributeError):
        pass


def _unlock(f) -> None:
    try:
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    except (OSError, AttributeError):
        pass


def load_history(path: Path | None = None) -> list[ApplicationEntry]:
    """Every logged application, oldest first.

    Missing, unreadable or malformed logs read as empty history. Rows without a
    url or a parseable date are skipped.
    """
    path = path or applications_log_path()
    if not path.exists():
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            _lock_shared(f)
            try:
                rows = json.load(f)
            finally:
                _unlock(f)
    except (OSError, ValueError) as exc:
        log.warning("Application log %s unreadable, treating as empty: %s", path.name, exc)
        return []

    if not isinstance(rows, list):
        log.warning("Application log %s is not a list, treating as empty", path.name)
        return []

    entries: list[ApplicationEntry] = []
    for row in rows:
        entry = ApplicationEntry.from_dict(row) if isinstance(row, dict) else None
        if entry is None:
            log.debug("Skipping malformed log row: %r", row)
            continue
        entries.append(entry)
    return entries
