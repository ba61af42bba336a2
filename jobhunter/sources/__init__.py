from urllib.parse import urlparse

from .base import ListingSource, SourceError
from .justjoin import JustJoinSource
from .nofluffjobs import NoFluffJobsSource
from .searxng import SearxngSource

from jobhunter.log import get_logger

log = get_logger(__name__)

__all__ = [
    "ListingSource", "SourceError", "NoFluffJobsSource", "JustJoinSource",
    "SearxngSource", "DEDICATED_SOURCES", "normalize_site", "get_source",
]

# Boards with a purpose-built adapter; everything else goes through SearXNG.
DEDICATED_SOURCES: dict[str, type[ListingSource]] = {
    NoFluffJobsSource.site: NoFluffJobsSource,
    JustJoinSource.site: JustJoinSource,
}


def normalize_site(site: str) -> str:
    """``https://www.justjoin.it/offers`` → ``justjoin.it``."""
    site = site.strip()
    if "://" in site:
        host = urlparse(site).hostname or ""
    else:
        host = site.split("/", 1)[0]
    host = host.lower()
    if host.startswith("www."):
        host = host[4:]
    return host


def get_source(site: str) -> ListingSource:
    cls = DEDICATED_SOURCES.get(site)
    if cls is not None:
        return cls()
    log.debug("No dedicated adapter for %s — using SearXNG", site)
    return SearxngSource(site)
