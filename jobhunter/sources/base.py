from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from jobhunter.models import RawListing


class SourceError(Exception):
    """A listing source could not be fetched or parsed."""


class ListingSource(ABC):
    site: str

    @abstractmethod
    def fetch(self, keywords: list[str]) -> Iterator[RawListing]:
        """One round trip to the board; yields listings matching any keyword."""
