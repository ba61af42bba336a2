"""CV-vs-JD assessment through an OpenAI-compatible chat model."""
from __future__ import annotations

import json
import re
from datetime import date
from typing import Callable

from jobhunter.config import get_env
from jobhunter.log import get_logger
from jobhunter.models import AnalysisResult, parse_iso_date
from jobhunter.retry import ServiceOverloaded, call_with_backoff

log = get_logger(__name__)

# 529 is the de-facto "overloaded" status; 503 is what most gateways send instead.
OVERLOAD_STATUSES: frozenset[int] = frozenset({503, 529})

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")


class AnalysisError(RuntimeError):
    """The model answered, but not with the JSON we asked for."""


def build_prompt(cv_text: str, jd_text: str, url: str) -> str:
    return f"""You are an expert HR analyst and ATS specialist. Analyze the CV against this job description.

Return ONLY valid JSON with this structure:
{{
  "company": "...",
  "role": "...",
  "match_score": 74,
  "go_no_go": "go|maybe|skip",
  "go_no_go_reason": "...",
  "salary": "16000-25000 PLN B2B",
  "ghost_score": 45,
  "ghost_signals": [
    {{ "signal": "...", "detail": "...", "weight": "high|medium|low" }}
  ]
}}

Rules:
- match_score 0-100; 70-80 is the ideal range, below 60 means skip, above 90 risks overqualification
- ghost_score 0-29 = genuine posting, 30-59 = medium risk, 60-100 = likely ghost/compliance posting
- ghost_signals must cite concrete evidence from the JD: vague requirements, no tech stack, no deliverables or team size, salary spread >40%, missing B2B/UoP on Polish remote roles, pipeline/talent-pool language
- salary: the exact range from the JD, or null if not mentioned

CV:
---
{cv_text}
---

Job Description (from {url}):
---
{jd_text}
---"""


def openai_invoke(prompt: str) -> str:
    """Single chat completion; overload statuses surface as ServiceOverloaded."""
    import openai

    client = openai.OpenAI(
        api_key=get_env("LLM_API_KEY") or None,
        base_url=get_env("LLM_BASE_URL") or None,
        max_retries=0,
    )
    model = get_env("LLM_MODEL", "gpt-4o")
    try:
        r = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=4000,
        )
    except openai.APIStatusError as exc:
        if exc.status_code in OVERLOAD_STATUSES:
            raise ServiceOverloaded(f"{model} overloaded (HTTP {exc.status_code})") from exc
        raise
    return (r.choices[0].message.content or "").strip()


def parse_result(text: str) -> AnalysisResult:
    raw = _FENCE_RE.sub("", text.strip())
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise AnalysisError(f"Model response is not JSON:\n{text[:500]}") from exc
    if not isinstance(data, dict):
        raise AnalysisError(f"Model response is not a JSON object:\n{text[:500]}")
    try:
        return AnalysisResult.from_dict(data)
    except (TypeError, ValueError) as exc:
        raise AnalysisError(f"Model response has bad scores: {exc}") from exc


def analyze_match(
    cv_text: str,
    jd_text: str,
    url: str,
    *,
    invoke_model: Callable[[str], str] | None = None,
    sleep: Callable[[float], None] | None = None,
) -> AnalysisResult:
    invoke = invoke_model or openai_invoke
    log.info("Analyzing %s (~%d input tokens)", url, (len(cv_text) + len(jd_text)) // 4)
    kwargs = {"sleep": sleep} if sleep is not None else {}
    text = call_with_backoff(invoke, build_prompt(cv_text, jd_text, url), **kwargs)
    result = parse_result(text)
    log.info("Analysis: match=%d ghost=%d verdict=%s", result.match_score, result.ghost_score, result.go_no_go)
    return result


def compute_age_days(posting_date: str | date | None, today: date | None = None) -> int | None:
    """Days since the JD's posting date; None when the page had no usable date."""
    posted = parse_iso_date(posting_date)
    if posted is None:
        return None
    return max(0, ((today or date.today()) - posted).days)
