"""JustJoin.it — listings scraped from the homepage's JSON-LD CollectionPage.

The board has no public feed. Its homepage embeds a schema.org CollectionPage
whose ``hasPart`` items carry only URLs, so titles are rebuilt from the slug.
"""
from __future__ import annotations

import json
from typing import Any, Iterator

import requests
from bs4 import BeautifulSoup

from jobhunter.heuristics import slug_to_title
from jobhunter.http import fetch_text
from jobhunter.log import get_logger
from jobhunter.models import RawListing
from jobhunter.sources.base import ListingSource, SourceError

log = get_logger(__name__)

HOME_URL = "https://justjoin.it/"


def _collection_parts(html: str) -> Iterator[dict[str, Any]]:
    """Items of every CollectionPage JSON-LD block; malformed blocks are skipped."""
    soup = BeautifulSoup(html, "html.parser")
    for script in soup.find_all("script", type="application/ld+json"):
        raw = script.string or script.get_text() or ""
        if not raw.strip():
            continue
        try:
            payload = json.loads(raw)
        except ValueError:
            log.debug("JustJoin: skipping malformed JSON-LD block")
            continue
        if not isinstance(payload, dict) or payload.get("@type") != "CollectionPage":
            continue
        parts = payload.get("hasPart")
        if not isinstance(parts, list):
            continue
        for item in parts:
            if isinstance(item, dict):
                yield item


class JustJoinSource(ListingSource):
    site = "justjoin.it"

    def __init__(self, timeout: float = 20) -> None:
        self.timeout = timeout

    def fetch(self, keywords: list[str]) -> Iterator[RawListing]:
        # slugs are dash-joined, so "qa engineer" must match "qa-engineer"
        kw = [k.lower().replace(" ", "-") for k in keywords]
        try:
            html, _ = fetch_text(HOME_URL, timeout=self.timeout, headers={"Accept": "text/html"})
        except requests.RequestException as exc:
            raise SourceError(f"JustJoin homepage unreachable: {exc}") from exc

        for item in _collection_parts(html):
            url = item.get("url")
            if not url or not isinstance(url, str):
                continue
            slug = url.rstrip("/").rsplit("/", 1)[-1].lower()
            if not any(k in slug for k in kw):
                continue
            yield RawListing(
                url=url,
                title=slug_to_title(slug),
                snippet=" ".join(p for p in slug.split("-") if p),
                site=self.site,
                age_days=None,
            )
