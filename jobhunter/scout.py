"""
Job discovery across configured boards.

Runs: per-site adapter (sequential, paused) → URL dedup → history cross-reference
→ salary / ghost / company heuristics.
"""
from __future__ import annotations

import time
from datetime import date, datetime
from typing import Callable, Iterable

from jobhunter.heuristics import extract_company, has_salary, is_ghost_preflag
from jobhunter.history import load_history
from jobhunter.log import get_logger
from jobhunter.models import ApplicationEntry, ConfigError, DiscoveryResult, RawListing
from jobhunter.sources import ListingSource, get_source, normalize_site

log = get_logger(__name__)

# Pause between boards; keeps us well under third-party rate limits.
SITE_PAUSE_SECONDS = 0.6


def _clean(values: Iterable[str]) -> list[str]:
    return [v.strip() for v in values if v and v.strip()]


def _search_site(source: ListingSource, keywords: list[str]) -> list[RawListing]:
    """Drain one adapter; any failure counts as zero results for that site."""
    try:
        results = list(source.fetch(keywords))
    except Exception as exc:
        log.warning("Scout failed for %s: %s", source.site, exc)
        return []
    log.info("Scout [%s]: %d results", source.site, len(results))
    return results


def dedupe(listings: Iterable[RawListing]) -> list[RawListing]:
    """First occurrence per exact URL wins; listings without a URL are dropped."""
    seen: set[str] = set()
    unique: list[RawListing] = []
    for item in listings:
        if not item.url or item.url in seen:
            continue
        seen.add(item.url)
        unique.append(item)
    return unique


def index_history(history: Iterable[ApplicationEntry]) -> dict[str, date]:
    """url → date the url was first logged."""
    first_seen: dict[str, date] = {}
    for entry in history:
        first_seen.setdefault(entry.url, entry.date)
    return first_seen


def annotate(listing: RawListing, first_seen: dict[str, date], today: date) -> DiscoveryResult:
    logged = first_seen.get(listing.url)
    text = f"{listing.title} {listing.snippet}"
    return DiscoveryResult(
        url=listing.url,
        title=listing.title,
        snippet=listing.snippet,
        site=listing.site,
        age_days=listing.age_days,
        company=extract_company(listing.title),
        has_salary=has_salary(text),
        ghost_preflag=is_ghost_preflag(listing.title, listing.snippet),
        already_seen=logged is not None,
        seen_days_ago=max(0, (today - logged).days) if logged is not None else None,
    )


def discover(
    role_keywords: list[str],
    search_sites: list[str],
    *,
    history: list[ApplicationEntry] | None = None,
    source_factory: Callable[[str], ListingSource] = get_source,
    pause: float = SITE_PAUSE_SECONDS,
    now: datetime | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> list[DiscoveryResult]:
    """Deduplicated, history-annotated postings for *role_keywords* on *search_sites*.

    Raises ``ConfigError`` before touching the network when either list is
    empty. Source outages never raise; they only shrink the result.
    """
    keywords = [k.lower() for k in _clean(role_keywords or [])]
    sites = [normalize_site(s) for s in _clean(search_sites or [])]
    sites = [s for s in sites if s]
    if not keywords:
        raise ConfigError("role_keywords is empty — nothing to search for")
    if not sites:
        raise ConfigError("search_sites is empty — nowhere to search")

    if history is None:
        history = load_history()
    first_seen = index_history(history)
    today = (now or datetime.now()).date()

    raw: list[RawListing] = []
    for i, site in enumerate(sites):
        if i:
            sleep(pause)
        raw.extend(_search_site(source_factory(site), keywords))

    unique = dedupe(raw)
    results = [annotate(item, first_seen, today) for item in unique]
    log.info(
        "Discovery complete — sites=%d, raw=%d, unique=%d, already_seen=%d",
        len(sites), len(raw), len(unique), sum(r.already_seen for r in results),
    )
    return results
