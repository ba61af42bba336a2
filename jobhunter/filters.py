"""Opt-in pass/fail checks of an analysed posting against the user config.

Each configured field yields exactly one FilterCheck, in a fixed order that the
report relies on. Unset fields yield nothing, so an empty list means "no
filters configured", never "everything passed".
"""
from __future__ import annotations

from jobhunter.models import AnalysisResult, FilterCheck, UserConfig, WorkMode

WORK_MODE_KEYWORDS: dict[WorkMode, tuple[str, ...]] = {
    WorkMode.REMOTE: ("remote", "zdaln", "home office", "work from home"),
    WorkMode.HYBRID: ("hybrid", "hybrydow"),
    WorkMode.ONSITE: ("on-site", "onsite", "in office", "stacjonarnie", "biuro"),
}

SALARY_KEYWORDS: tuple[str, ...] = (
    "salary", "wynagrodzenie", "zł", "pln", "eur", "usd", "b2b", "uop", "umowa",
)


def _match_score(config: UserConfig, result: AnalysisResult) -> FilterCheck:
    ok = result.match_score >= config.min_match_score
    return FilterCheck(
        "Match Score", ok,
        f"{result.match_score} {'≥' if ok else '<'} {config.min_match_score}",
    )


def _ghost_risk(config: UserConfig, result: AnalysisResult) -> FilterCheck:
    ok = result.ghost_score <= config.max_ghost_score
    return FilterCheck(
        "Ghost Risk", ok,
        f"{result.ghost_score} {'≤' if ok else '>'} {config.max_ghost_score}",
    )


def _freshness(config: UserConfig, age_days: int | None) -> FilterCheck:
    if age_days is None:
        return FilterCheck("Freshness", True, "Posting date unknown — cannot verify")
    ok = age_days <= config.max_age_days
    return FilterCheck(
        "Freshness", ok,
        f"{age_days}d {'≤' if ok else '>'} {config.max_age_days}d",
    )


def _work_mode(mode: WorkMode, jd_lower: str) -> FilterCheck:
    found = next((k for k in WORK_MODE_KEYWORDS[mode] if k in jd_lower), None)
    if found is None:
        return FilterCheck("Work Mode", False, f"{mode.value} required, not found in JD")
    return FilterCheck("Work Mode", True, f"{mode.value} detected ('{found}')")


def _salary_visible(jd_lower: str) -> FilterCheck:
    if any(k in jd_lower for k in SALARY_KEYWORDS):
        return FilterCheck("Salary Visible", True, "Salary information detected in JD")
    return FilterCheck("Salary Visible", False, "No salary information found")


def _role_keywords(keywords: tuple[str, ...], jd_lower: str) -> FilterCheck:
    # a blank keyword is a substring of every JD
    matched = [k for k in keywords if k.strip() and k.strip().lower() in jd_lower]
    if matched:
        return FilterCheck("Role Keywords", True, f"Matched: {', '.join(matched)}")
    return FilterCheck(
        "Role Keywords", False, f"None of [{', '.join(keywords)}] found in JD",
    )


def evaluate_filters(
    config: UserConfig,
    result: AnalysisResult,
    jd_text: str,
    posting_age_days: int | None,
) -> list[FilterCheck]:
    jd_lower = (jd_text or "").lower()
    checks: list[FilterCheck] = []

    if config.min_match_score is not None:
        checks.append(_match_score(config, result))
    if config.max_ghost_score is not None:
        checks.append(_ghost_risk(config, result))
    if config.max_age_days is not None:
        checks.append(_freshness(config, posting_age_days))
    if config.work_mode is not None and config.work_mode is not WorkMode.ANY:
        checks.append(_work_mode(config.work_mode, jd_lower))
    if config.require_salary:
        checks.append(_salary_visible(jd_lower))
    if config.role_keywords:
        checks.append(_role_keywords(config.role_keywords, jd_lower))

    return checks


def summarize_checks(checks: list[FilterCheck]) -> tuple[int, int]:
    """(passed, total) for a one-line summary."""
    return sum(c.passed for c in checks), len(checks)
