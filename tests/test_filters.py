"""Tests for the opt-in filter evaluator."""

import pytest

from jobhunter.filters import evaluate_filters, summarize_checks
from jobhunter.models import AnalysisResult, UserConfig, WorkMode

ORDER = ["Match Score", "Ghost Risk", "Freshness", "Work Mode", "Salary Visible", "Role Keywords"]

JD = (
    "Senior QA Engineer. Fully remote, B2B contract 16000-25000 PLN. "
    "You will own our Playwright and Python test automation."
)


@pytest.fixture
def result():
    return AnalysisResult(match_score=74, ghost_score=25, salary="16000-25000 PLN B2B")


def _full_config(**overrides):
    values = dict(
        min_match_score=70,
        max_ghost_score=30,
        max_age_days=10,
        require_salary=True,
        work_mode=WorkMode.REMOTE,
        role_keywords=("playwright", "cypress"),
    )
    values.update(overrides)
    return UserConfig(**values)


class TestEvaluateFilters:
    def test_empty_config_yields_no_checks(self, result):
        assert evaluate_filters(UserConfig(), result, JD, 3) == []

    def test_all_rules_in_fixed_order(self, result):
        checks = evaluate_filters(_full_config(), result, JD, 3)
        assert [c.name for c in checks] == ORDER
        assert all(c.passed for c in checks)

    def test_order_independent_of_config_key_order(self, result):
        data = {
            "role_keywords": ["python"],
            "require_salary": True,
            "work_mode": "hybrid",
            "max_age_days": 5,
            "max_ghost_score": 50,
            "min_match_score": 60,
        }
        checks = evaluate_filters(UserConfig.from_dict(data), result, JD, 1)
        assert [c.name for c in checks] == ORDER

    @pytest.mark.parametrize("field, expected", [
        ("min_match_score", ["Match Score"]),
        ("max_ghost_score", ["Ghost Risk"]),
        ("max_age_days", ["Freshness"]),
    ])
    def test_single_rule(self, result, field, expected):
        checks = evaluate_filters(UserConfig(**{field: 10}), result, JD, 3)
        assert [c.name for c in checks] == expected

    def test_match_score_reason(self, result):
        (ok,) = evaluate_filters(UserConfig(min_match_score=74), result, JD, None)
        assert ok.passed and ok.reason == "74 ≥ 74"
        (bad,) = evaluate_filters(UserConfig(min_match_score=80), result, JD, None)
        assert not bad.passed and bad.reason == "74 < 80"

    def test_ghost_risk_reason(self, result):
        (bad,) = evaluate_filters(UserConfig(max_ghost_score=20), result, JD, None)
        assert not bad.passed and bad.reason == "25 > 20"

    def test_freshness_unknown_age_passes_as_unverifiable(self, result):
        (check,) = evaluate_filters(UserConfig(max_age_days=10), result, JD, None)
        assert check.passed is True
        assert "unknown" in check.reason.lower()

    def test_freshness_stale(self, result):
        (check,) = evaluate_filters(UserConfig(max_age_days=10), result, JD, 12)
        assert check.passed is False
        assert check.reason == "12d > 10d"

    def test_work_mode_any_is_not_a_rule(self, result):
        assert evaluate_filters(UserConfig(work_mode=WorkMode.ANY), result, JD, None) == []

    @pytest.mark.parametrize("mode, text, passed", [
        (WorkMode.REMOTE, "Praca zdalna", True),
        (WorkMode.HYBRID, "2 days hybrid", True),
        (WorkMode.HYBRID, "Model hybrydowy", True),
        (WorkMode.ONSITE, "Praca stacjonarnie w Krakowie", True),
        (WorkMode.ONSITE, "Fully remote", False),
    ])
    def test_work_mode_keywords(self, result, mode, text, passed):
        (check,) = evaluate_filters(UserConfig(work_mode=mode), result, text, None)
        assert check.passed is passed
        assert mode.value in check.reason

    def test_require_salary_false_is_not_a_rule(self, result):
        assert evaluate_filters(UserConfig(require_salary=False), result, JD, None) == []

    def test_salary_missing(self, result):
        (check,) = evaluate_filters(UserConfig(require_salary=True), result, "Competitive package", None)
        assert check.passed is False

    def test_role_keywords_reasons(self, result):
        (ok,) = evaluate_filters(UserConfig(role_keywords=("Python", "Cypress", "playwright")), result, JD, None)
        assert ok.passed
        assert ok.reason == "Matched: Python, playwright"

        (bad,) = evaluate_filters(UserConfig(role_keywords=("cobol", "fortran")), result, JD, None)
        assert not bad.passed
        assert bad.reason == "None of [cobol, fortran] found in JD"

    def test_empty_role_keywords_is_not_a_rule(self, result):
        assert evaluate_filters(UserConfig(role_keywords=()), result, JD, None) == []

    def test_blank_role_keyword_matches_nothing(self, result):
        (check,) = evaluate_filters(UserConfig(role_keywords=("",)), result, "none of this is relevant", None)
        assert check.passed is False

        (check,) = evaluate_filters(UserConfig(role_keywords=("", "cobol")), result, "python", None)
        assert check.passed is False

    def test_rules_do_not_short_circuit(self, result):
        config = _full_config(min_match_score=99, max_ghost_score=0)
        checks = evaluate_filters(config, result, JD, 3)
        assert [c.passed for c in checks] == [False, False, True, True, True, True]


def test_summarize_checks(result):
    checks = evaluate_filters(_full_config(min_match_score=99), result, JD, 3)
    assert summarize_checks(checks) == (5, 6)
    assert summarize_checks([]) == (0, 0)
