"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from prime_table.config import DEFAULT_MAX_NUMBER, SieveConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PRIME_TABLE_MAX_NUMBER", "PRIME_TABLE_LOG_LEVEL", "PRIME_TABLE_JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)


class TestSieveConfig:
    """Tests for SieveConfig."""

    def test_defaults(self):
        """Defaults match the stock bound."""
        config = SieveConfig.from_env()
        assert config.max_number == DEFAULT_MAX_NUMBER == 101
        assert config.log_level == "WARNING"
        assert config.json_logs is False

    def test_from_env(self, monkeypatch):
        """PRIME_TABLE_* variables override defaults."""
        monkeypatch.setenv("PRIME_TABLE_MAX_NUMBER", "71")
        monkeypatch.setenv("PRIME_TABLE_LOG_LEVEL", "debug")
        monkeypatch.setenv("PRIME_TABLE_JSON_LOGS", "yes")

        config = SieveConfig.from_env()
        assert config.max_number == 71
        assert config.log_level == "DEBUG"
        assert config.json_logs is True

    @pytest.mark.parametrize("raw", ["lots", "-1"])
    def test_invalid_max_number(self, monkeypatch, raw):
        """Non-integer and negative bounds are rejected."""
        monkeypatch.setenv("PRIME_TABLE_MAX_NUMBER", raw)
        with pytest.raises(ValidationError):
            SieveConfig.from_env()

    def test_invalid_log_level(self, monkeypatch):
        """Unknown level names are rejected."""
        monkeypatch.setenv("PRIME_TABLE_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            SieveConfig.from_env()

    def test_invalid_json_flag(self, monkeypatch):
        """Unparseable booleans are rejected."""
        monkeypatch.setenv("PRIME_TABLE_JSON_LOGS", "maybe")
        with pytest.raises(ValidationError):
            SieveConfig.from_env()

    def test_errors_are_value_errors(self):
        """Validation failures can be caught as ValueError."""
        with pytest.raises(ValueError):
            SieveConfig(max_number=-5)

    def test_keyword_arguments(self, monkeypatch):
        """Explicit arguments win over the environment and are normalised."""
        monkeypatch.setenv("PRIME_TABLE_MAX_NUMBER", "71")
        config = SieveConfig(max_number=10, log_level="info")
        assert config.max_number == 10
        assert config.log_level == "INFO"
