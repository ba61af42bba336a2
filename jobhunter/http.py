"""Plain HTTP GET used by every listing source."""
from __future__ import annotations

from typing import Any

import requests

BROWSER_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    # Some boards switch markup/language on this header.
    "Accept-Language": "en-US,en;q=0.9,pl;q=0.8",
}


def fetch_text(
    url: str,
    *,
    timeout: float,
    headers: dict[str, str] | None = None,
    params: dict[str, Any] | None = None,
) -> tuple[str, str]:
    """GET *url* and return ``(body, content_type)``.

    Raises ``requests.RequestException`` on connection errors, timeouts and
    non-2xx responses.
    """
    r = requests.get(
        url,
        params=params,
        headers={**BROWSER_HEADERS, **(headers or {})},
        timeout=timeout,
    )
    r.raise_for_status()
    return r.text, r.headers.get("Content-Type", "")
