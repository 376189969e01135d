"""Tests for src/config — environment-driven settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from src.config import Settings, configure_logging, get_settings
from src.engine.base import TableConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment and any .env file out of the tests."""
    for key in (
        "DEBUG", "LOG_LEVEL", "TABLE_PLAYERS", "STARTING_BANKROLL",
        "STARTING_MIN_BET", "MIN_BET_INCREASE", "ROUNDS_PER_STEP",
        "BOOT_WHEN_BROKE",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSettings:
    def test_defaults_match_table_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.table_config() == TableConfig()

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TABLE_PLAYERS", "Ann, Bob ,Cy")
        monkeypatch.setenv("STARTING_BANKROLL", "500")
        monkeypatch.setenv("ROUNDS_PER_STEP", "2")
        monkeypatch.setenv("BOOT_WHEN_BROKE", "true")

        config = Settings(_env_file=None).table_config()

        assert config.players == ("Ann", "Bob", "Cy")
        assert config.starting_bankroll == 500
        assert config.rounds_per_step == 2
        assert config.boot_when_broke is True

    def test_single_player(self, monkeypatch):
        monkeypatch.setenv("TABLE_PLAYERS", "You")
        assert Settings(_env_file=None).player_names == ("You",)

    def test_malformed_table_fails_fast(self, monkeypatch):
        monkeypatch.setenv("STARTING_BANKROLL", "0")
        with pytest.raises(ValueError, match="Starting bankroll must be positive"):
            Settings(_env_file=None).table_config()

    def test_duplicate_names_fail_fast(self, monkeypatch):
        monkeypatch.setenv("TABLE_PLAYERS", "A,A")
        with pytest.raises(ValueError, match="unique"):
            Settings(_env_file=None).table_config()

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        level, handlers = root.level, root.handlers[:]
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_sets_root_level(self):
        configure_logging(Settings(_env_file=None, log_level="WARNING"))
        assert logging.getLogger().level == logging.WARNING

    def test_debug_overrides_level(self):
        configure_logging(Settings(_env_file=None, debug=True, log_level="ERROR"))
        assert logging.getLogger().level == logging.DEBUG
