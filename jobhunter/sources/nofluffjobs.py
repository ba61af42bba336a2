"""NoFluffJobs — public RSS feed of every open posting (no API key required).

The feed is one document; keyword filtering happens client side.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Iterator

import feedparser
import requests

from jobhunter.http import fetch_text
from jobhunter.log import get_logger
from jobhunter.models import RawListing
from jobhunter.sources.base import ListingSource, SourceError

log = get_logger(__name__)

FEED_URL = "https://nofluffjobs.com/rss"
MAX_RESULTS = 30
SNIPPET_CHARS = 200

_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")


def _strip_html(text: str) -> str:
    return _WS_RE.sub(" ", _TAG_RE.sub(" ", text or "")).strip()


def age_in_days(published: str, now: datetime | None = None) -> int | None:
    """Whole days since an RSS/ISO timestamp, floored at 0; None if unparseable."""
    if not published:
        return None
    try:
        when = parsedate_to_datetime(published)
    except (TypeError, ValueError, IndexError):
        try:
            when = datetime.fromisoformat(published.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    if when is None:
        return None
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return max(0, (now - when).days)


class NoFluffJobsSource(ListingSource):
    site = "nofluffjobs.com"

    def __init__(self, timeout: float = 30) -> None:
        self.timeout = timeout

    def _load_feed(self) -> feedparser.FeedParserDict:
        try:
            body, _ = fetch_text(
                FEED_URL,
                timeout=self.timeout,
                headers={"Accept": "application/rss+xml,application/xml,text/xml"},
            )
        except requests.RequestException as exc:
            raise SourceError(f"NoFluffJobs feed unreachable: {exc}") from exc

        feed = feedparser.parse(body)
        if feed.bozo and not feed.entries:
            raise SourceError(f"NoFluffJobs feed unparseable: {feed.get('bozo_exception')}")
        return feed

    def fetch(self, keywords: list[str]) -> Iterator[RawListing]:
        kw = [k.lower() for k in keywords]
        feed = self._load_feed()
        now = datetime.now(timezone.utc)

        count = 0
        for entry in feed.entries:
            if count >= MAX_RESULTS:
                break
            title = entry.get("title", "")
            link = entry.get("link") or entry.get("id", "")
            if not title or not link:
                continue

            snippet = _strip_html(entry.get("summary", ""))[:SNIPPET_CHARS]
            text = f"{title} {snippet}".lower()
            if not any(k in text for k in kw):
                continue

            count += 1
            yield RawListing(
                url=link,
                title=title,
                snippet=snippet,
                site=self.site,
                age_days=age_in_days(entry.get("published") or entry.get("updated", ""), now),
            )
        log.debug("NoFluffJobs: %d of %d feed entries matched", count, len(feed.entries))
