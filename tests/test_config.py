"""Tests for environment-driven settings."""

import pytest

from forestfilter.config import Settings


class TestSettings:
    def test_defaults_are_off(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FORESTFILTER_RECORD_FILTER_METRICS", raising=False)
        monkeypatch.delenv("FORESTFILTER_CHECK_FOREST_STRUCTURE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.record_filter_metrics is False
        assert settings.check_forest_structure is False

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORESTFILTER_RECORD_FILTER_METRICS", "true")
        monkeypatch.setenv("FORESTFILTER_CHECK_FOREST_STRUCTURE", "1")

        settings = Settings(_env_file=None)

        assert settings.record_filter_metrics is True
        assert settings.check_forest_structure is True
