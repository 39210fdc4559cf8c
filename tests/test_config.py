"""
Unit tests for configuration loading.
"""

from pathlib import Path

import pytest

from weatherlog.config import Config
from weatherlog.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("WEATHERLOG_STORE", raising=False)
    monkeypatch.delenv("WEATHERLOG_NUMERIC_FIELD", raising=False)


class TestFromEnv:
    def test_defaults(self):
        config = Config.from_env()
        assert config.store_path == Path("data/store.txt")
        assert config.numeric_field == "high"

    def test_store_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("WEATHERLOG_STORE", str(tmp_path / "w.txt"))
        assert Config.from_env().store_path == tmp_path / "w.txt"

    def test_numeric_field_override(self, monkeypatch):
        monkeypatch.setenv("WEATHERLOG_NUMERIC_FIELD", "low")
        assert Config.from_env().numeric_field == "low"

    @pytest.mark.parametrize("value", ["", "none", "None", "NONE"])
    def test_no_numeric_field(self, monkeypatch, value):
        monkeypatch.setenv("WEATHERLOG_NUMERIC_FIELD", value)
        assert Config.from_env().numeric_field is None

    def test_unknown_numeric_field(self, monkeypatch):
        monkeypatch.setenv("WEATHERLOG_NUMERIC_FIELD", "temp")
        with pytest.raises(ConfigError):
            Config.from_env()
