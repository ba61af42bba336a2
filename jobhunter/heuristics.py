"""Cheap text pre-screens run on every discovered posting.

These are regex/substring checks over title and snippet only. They exist to
steer attention before the model is called, so false negatives are fine.
"""
from __future__ import annotations

import re

_SALARY_RE = re.compile(
    r"\d[\d\s]*(?:k\b|pln|zł|eur|usd|\$|€)"
    r"|\bb2b\b|\buop\b|salary|wynagrodzenie",
    re.IGNORECASE,
)

# Stock phrases of perpetual / placeholder recruiting, English and Polish.
GHOST_PHRASES: tuple[str, ...] = (
    "talent pool",
    "pula talent",
    "various clients",
    "multiple position",
    "ongoing recruitment",
    "ciągły nabór",
    "always looking",
    "pipeline",
    "future opportunit",
    "speculative",
)

# Tried in order; first match wins.
_COMPANY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r" @ (.{2,60})$"),  # NoFluffJobs feed titles
    re.compile(r" at (.{2,40})$", re.IGNORECASE),
    re.compile(r"\|(.{2,40})$"),
)


def has_salary(text: str) -> bool:
    return bool(_SALARY_RE.search(text or ""))


def is_ghost_preflag(title: str, snippet: str) -> bool:
    text = f"{title or ''} {snippet or ''}".lower()
    return any(phrase in text for phrase in GHOST_PHRASES)


def extract_company(title: str) -> str | None:
    """Employer name from a listing title, or None when no convention matches."""
    for pattern in _COMPANY_PATTERNS:
        m = pattern.search(title or "")
        if m:
            company = m.group(1).strip()
            # whitespace-only capture: fall through to the next convention
            if company:
                return company
    return None


def slug_to_title(slug: str) -> str:
    """``acme-senior-qa-engineer-warszawa-python`` → ``Acme Senior Qa Engineer``.

    Board slugs end in ``-<city>-<technology>``; both are dropped when the slug
    is long enough to still leave a title behind.
    """
    parts = [p for p in slug.split("-") if p]
    if len(parts) > 2:
        parts = parts[:-2]
    return " ".join(p[:1].upper() + p[1:] for p in parts)
