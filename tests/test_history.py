"""Tests for reading the application log and the user config file."""

import json
from datetime import date

import pytest

from jobhunter.config import load_user_config
from jobhunter.history import load_history
from jobhunter.models import ApplicationEntry, ConfigError, UserConfig, WorkMode


class TestLoadHistory:
    def test_missing_file_is_empty(self, tmp_path):
        assert load_history(tmp_path / "applications.json") == []

    def test_reads_entries_and_skips_bad_rows(self, tmp_path):
        path = tmp_path / "applications.json"
        path.write_text(json.dumps([
            {"id": "1", "url": "https://a", "date": "2026-10-01", "company": "Acme",
             "role": "QA", "match_score": 74, "ghost_score": 20, "report_file": "x.html"},
            {"url": "https://b", "date": "2026-10-02T09:30:00Z"},
            {"url": "", "date": "2026-10-03"},
            {"url": "https://c", "date": "someday"},
            "not a row",
        ]), encoding="utf-8")

        entries = load_history(path)

        assert [e.url for e in entries] == ["https://a", "https://b"]
        assert entries[0].date == date(2026, 10, 1)
        assert entries[0].company == "Acme"
        assert entries[0].match_score == 74
        assert entries[1].date == date(2026, 10, 2)

    def test_corrupt_json_is_empty(self, tmp_path):
        path = tmp_path / "applications.json"
        path.write_text("[{oops", encoding="utf-8")
        assert load_history(path) == []

    def test_non_list_is_empty(self, tmp_path):
        path = tmp_path / "applications.json"
        path.write_text('{"url": "https://a"}', encoding="utf-8")
        assert load_history(path) == []

    def test_env_override(self, tmp_path, monkeypatch):
        path = tmp_path / "log.json"
        path.write_text('[{"url": "https://a", "date": "2026-01-01"}]', encoding="utf-8")
        monkeypatch.setenv("JOBHUNTER_LOG_PATH", str(path))
        assert load_history() == [ApplicationEntry(url="https://a", date=date(2026, 1, 1))]


class TestUserConfig:
    def test_from_dict(self):
        config = UserConfig.from_dict({
            "min_match_score": 65,
            "require_salary": True,
            "work_mode": "Remote",
            "role_keywords": ["qa", "sdet"],
            "search_sites": ["nofluffjobs.com"],
            "unknown_key": "ignored",
        })
        assert config.min_match_score == 65
        assert config.max_ghost_score is None
        assert config.require_salary is True
        assert config.work_mode is WorkMode.REMOTE
        assert config.role_keywords == ("qa", "sdet")
        assert config.search_sites == ("nofluffjobs.com",)

    def test_blank_list_items_dropped(self):
        config = UserConfig.from_dict({
            "role_keywords": ["qa", None, "", "  sdet  "],
            "search_sites": ["  ", "justjoin.it"],
        })
        assert config.role_keywords == ("qa", "sdet")
        assert config.search_sites == ("justjoin.it",)

    def test_empty(self):
        assert UserConfig.from_dict(None) == UserConfig()
        assert UserConfig.from_dict({}) == UserConfig()

    @pytest.mark.parametrize("data", [
        {"work_mode": "sometimes"},
        {"min_match_score": "high"},
        {"max_age_days": True},
        {"require_salary": "yes"},
        {"role_keywords": "qa"},
        {"role_keywords": ["qa", 3]},
        {"search_sites": [{"host": "pracuj.pl"}]},
        ["not", "a", "mapping"],
    ])
    def test_invalid(self, data):
        with pytest.raises(ConfigError):
            UserConfig.from_dict(data)


class TestLoadUserConfig:
    def test_yaml_file(self, tmp_path):
        path = tmp_path / "jobhunter.yaml"
        path.write_text("max_age_days: 14\nwork_mode: hybrid\nrole_keywords: [qa]\n", encoding="utf-8")
        config = load_user_config(path)
        assert config.max_age_days == 14
        assert config.work_mode is WorkMode.HYBRID
        assert config.role_keywords == ("qa",)

    def test_blank_yaml_item_is_not_a_keyword(self, tmp_path):
        path = tmp_path / "jobhunter.yaml"
        path.write_text("role_keywords:\n  - qa\n  -\n", encoding="utf-8")
        assert load_user_config(path).role_keywords == ("qa",)

    def test_missing_file_means_no_filters(self, tmp_path):
        assert load_user_config(tmp_path / "nope.yaml") == UserConfig()

    def test_broken_yaml_means_no_filters(self, tmp_path):
        path = tmp_path / "jobhunter.yaml"
        path.write_text("role_keywords: [qa\n", encoding="utf-8")
        assert load_user_config(path) == UserConfig()

    def test_invalid_values_mean_no_filters(self, tmp_path):
        path = tmp_path / "jobhunter.yaml"
        path.write_text("work_mode: sometimes\n", encoding="utf-8")
        assert load_user_config(path) == UserConfig()
