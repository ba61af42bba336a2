#!/usr/bin/env python3
"""Entry point to discover postings for the configured roles and boards."""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobhunter.config import config_path, load_user_config
from jobhunter.log import get_logger
from jobhunter.models import ConfigError

log = get_logger(__name__)


def _describe(r) -> str:
    flags = []
    if r.already_seen:
        flags.append(f"seen {r.seen_days_ago}d ago")
    if r.has_salary:
        flags.append("$")
    if r.ghost_preflag:
        flags.append("ghost?")
    if r.age_days is not None:
        flags.append(f"{r.age_days}d old")
    tag = f" [{', '.join(flags)}]" if flags else ""
    who = f" @ {r.company}" if r.company and r.company not in r.title else ""
    return f"{r.site:<18} {r.title}{who}{tag}\n{'':<18} {r.url}"


if __name__ == "__main__":
    config = load_user_config()

    from jobhunter.scout import discover

    try:
        results = discover(list(config.role_keywords or []), list(config.search_sites or []))
    except ConfigError as exc:
        log.error("%s (set role_keywords and search_sites in %s)", exc, config_path())
        sys.exit(1)

    for r in results:
        log.info(_describe(r))
    log.info("%d posting(s), %d new", len(results), sum(not r.already_seen for r in results))
