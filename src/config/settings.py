"""
Quantum Flip - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import os
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

from src.engine.base import TableConfig

_SECRET_KEYS = (
    "DEBUG",
    "LOG_LEVEL",
    "TABLE_PLAYERS",
    "STARTING_BANKROLL",
    "STARTING_MIN_BET",
    "MIN_BET_INCREASE",
    "ROUNDS_PER_STEP",
    "BOOT_WHEN_BROKE",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        for key in _SECRET_KEYS:
            if key not in os.environ and key in st.secrets:
                os.environ[key] = str(st.secrets[key])
    except Exception:
        # No secrets file outside Streamlit Cloud
        pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Table
    table_players: str = "P1,P2"
    starting_bankroll: int = 200
    starting_min_bet: int = 10
    min_bet_increase: int = 5
    rounds_per_step: int = 5
    boot_when_broke: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level {value!r}.")
        return level

    @property
    def player_names(self) -> tuple[str, ...]:
        """Seat names parsed from the comma separated ``table_players``."""
        return tuple(name.strip() for name in self.table_players.split(","))

    def table_config(self) -> TableConfig:
        """Build the engine configuration. Raises ValueError if malformed."""
        return TableConfig(
            players=self.player_names,
            starting_bankroll=self.starting_bankroll,
            starting_min_bet=self.starting_min_bet,
            min_bet_increase=self.min_bet_increase,
            rounds_per_step=self.rounds_per_step,
            boot_when_broke=self.boot_when_broke,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()
