"""SearXNG meta-search — site-scoped fallback for boards without an adapter.

Public instances come and go, so a short list is tried in order and the first
one that answers with results wins.
"""
from __future__ import annotations

import json
from typing import Any, Iterator

import requests

from jobhunter.http import fetch_text
from jobhunter.log import get_logger
from jobhunter.models import RawListing
from jobhunter.sources.base import ListingSource

log = get_logger(__name__)

INSTANCES: tuple[str, ...] = (
    "https://searx.be",
    "https://searxng.site",
    "https://darmarit.org/searx",
)
MAX_RESULTS = 10


class SearxngSource(ListingSource):
    def __init__(
        self,
        site: str,
        instances: tuple[str, ...] = INSTANCES,
        timeout: float = 12,
    ) -> None:
        self.site = site
        self.instances = instances
        self.timeout = timeout

    def _query_instance(self, instance: str, query: str) -> list[dict[str, Any]]:
        body, _ = fetch_text(
            f"{instance.rstrip('/')}/search",
            timeout=self.timeout,
            headers={"Accept": "application/json"},
            params={"q": query, "format": "json", "categories": "general", "language": "en-US"},
        )
        data = json.loads(body)
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise ValueError("response has no results list")
        return [r for r in results if isinstance(r, dict)]

    def fetch(self, keywords: list[str]) -> Iterator[RawListing]:
        query = f"site:{self.site} {' '.join(k.lower() for k in keywords)}"
        for instance in self.instances:
            try:
                results = self._query_instance(instance, query)
            except (requests.RequestException, ValueError) as exc:
                log.debug("SearXNG %s failed for %s: %s", instance, self.site, exc)
                continue
            if not results:
                log.debug("SearXNG %s returned nothing for %s", instance, self.site)
                continue

            for res in results[:MAX_RESULTS]:
                url = res.get("url") or ""
                if not url:
                    continue
                yield RawListing(
                    url=url,
                    title=res.get("title") or "",
                    snippet=res.get("content") or "",
                    site=self.site,
                    age_days=None,
                )
            return
        log.info("SearXNG: no instance answered for %s", self.site)
