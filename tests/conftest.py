"""
Quantum Flip - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random

import pytest

from src.engine.base import TableConfig
from src.engine.solo import SoloWagerEngine
from src.engine.wager_round import WagerRoundEngine


class FixedRollSource:
    """Roll source that replays a scripted sequence of faces."""

    def __init__(self, *faces: int) -> None:
        self._faces = list(faces)
        self.calls = 0

    def roll(self) -> int:
        self.calls += 1
        return self._faces.pop(0)


# =============================================================================
# TABLE CONFIGURATIONS
# =============================================================================

@pytest.fixture
def two_player_config() -> TableConfig:
    """Two seats, bankroll 200, ante 10, +5 every 5 rounds."""
    return TableConfig(
        players=("P1", "P2"),
        starting_bankroll=200,
        starting_min_bet=10,
        min_bet_increase=5,
        rounds_per_step=5,
    )


@pytest.fixture
def three_player_config() -> TableConfig:
    return TableConfig(
        players=("Ann", "Bob", "Cy"),
        starting_bankroll=100,
        starting_min_bet=5,
        min_bet_increase=5,
        rounds_per_step=3,
    )


# =============================================================================
# ENGINES
# =============================================================================

@pytest.fixture
def engine(two_player_config) -> WagerRoundEngine:
    return WagerRoundEngine(two_player_config)


@pytest.fixture
def three_engine(three_player_config) -> WagerRoundEngine:
    return WagerRoundEngine(three_player_config)


@pytest.fixture
def single_engine() -> WagerRoundEngine:
    """One seat with bankroll 200 and ante 10 (no boot)."""
    return WagerRoundEngine(TableConfig(
        players=("Solo",),
        starting_bankroll=200,
        starting_min_bet=10,
    ))


@pytest.fixture
def solo_engine() -> SoloWagerEngine:
    """Solo table with the default solo settings."""
    return SoloWagerEngine()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def fixed_rolls():
    """Factory for scripted roll sources."""
    return FixedRollSource
