"""Data models for discovered postings, the application log and filters."""
from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from typing import Any

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class ConfigError(ValueError):
    """Missing or malformed user configuration."""


class WorkMode(str, Enum):
    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"
    ANY = "any"


def parse_iso_date(value: Any) -> date | None:
    """First YYYY-MM-DD found in *value*, or None."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    m = _ISO_DATE_RE.search(value)
    if not m:
        return None
    try:
        return date.fromisoformat(m.group(0))
    except ValueError:
        return None


@dataclass
class RawListing:
    url: str
    title: str
    snippet: str
    site: str
    age_days: int | None = None


@dataclass
class DiscoveryResult(RawListing):
    company: str | None = None
    has_salary: bool = False
    ghost_preflag: bool = False
    already_seen: bool = False
    seen_days_ago: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ApplicationEntry:
    """One row of the persisted application log (owned elsewhere, read here)."""

    url: str
    date: date
    id: str = ""
    company: str = ""
    role: str = ""
    match_score: int = 0
    ghost_score: int = 0
    status: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ApplicationEntry | None:
        """Build an entry from a log row; None when url or date is unusable."""
        url = data.get("url")
        logged = parse_iso_date(data.get("date"))
        if not url or not isinstance(url, str) or logged is None:
            return None
        return cls(
            url=url,
            date=logged,
            id=str(data.get("id", "")),
            company=data.get("company") or "",
            role=data.get("role") or "",
            match_score=data.get("match_score") or 0,
            ghost_score=data.get("ghost_score") or 0,
            status=data.get("status"),
        )


@dataclass
class FilterCheck:
    name: str
    passed: bool
    reason: str


_INT_FIELDS = ("min_match_score", "max_ghost_score", "max_age_days")
_LIST_FIELDS = ("role_keywords", "search_sites")


@dataclass(frozen=True)
class UserConfig:
    """Opt-in filter thresholds and discovery inputs; None means unset."""

    min_match_score: int | None = None
    max_ghost_score: int | None = None
    max_age_days: int | None = None
    require_salary: bool | None = None
    work_mode: WorkMode | None = None
    role_keywords: tuple[str, ...] | None = None
    search_sites: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> UserConfig:
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"config must be a mapping, got {type(data).__name__}")

        kwargs: dict[str, Any] = {}
        for key in _INT_FIELDS:
            value = data.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{key} must be an integer, got {value!r}")
            kwargs[key] = value

        if data.get("require_salary") is not None:
            if not isinstance(data["require_salary"], bool):
                raise ConfigError(f"require_salary must be true/false, got {data['require_salary']!r}")
            kwargs["require_salary"] = data["require_salary"]

        if data.get("work_mode") is not None:
            try:
                kwargs["work_mode"] = WorkMode(str(data["work_mode"]).lower())
            except ValueError:
                allowed = ", ".join(m.value for m in WorkMode)
                raise ConfigError(
                    f"work_mode must be one of {allowed}, got {data['work_mode']!r}"
                ) from None

        for key in _LIST_FIELDS:
            value = data.get(key)
            if value is None:
                continue
            if isinstance(value, str) or not isinstance(value, (list, tuple)):
                raise ConfigError(f"{key} must be a list of strings, got {value!r}")
            items: list[str] = []
            for v in value:
                if v is None:
                    continue
                if not isinstance(v, str):
                    raise ConfigError(f"{key} entries must be strings, got {v!r}")
                if v.strip():
                    items.append(v.strip())
            kwargs[key] = tuple(items)

        return cls(**kwargs)


def _score(data: dict[str, Any], key: str) -> int:
    """A required 0-100 score; a missing one must not read as 0."""
    value = data.get(key)
    if value is None or isinstance(value, bool):
        raise ValueError(f"{key} missing or not a number: {value!r}")
    return int(value)


@dataclass
class AnalysisResult:
    """The slice of a model assessment the filters and log rely on."""

    match_score: int
    ghost_score: int
    salary: str | None = None
    company: str = ""
    role: str = ""
    go_no_go: str = "maybe"
    go_no_go_reason: str = ""
    ghost_signals: list[dict[str, Any]] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AnalysisResult:
        return cls(
            match_score=_score(data, "match_score"),
            ghost_score=_score(data, "ghost_score"),
            salary=data.get("salary") or None,
            company=data.get("company") or "",
            role=data.get("role") or "",
            go_no_go=data.get("go_no_go") or "maybe",
            go_no_go_reason=data.get("go_no_go_reason") or "",
            ghost_signals=list(data.get("ghost_signals") or []),
            raw=data,
        )
