"""
Quantum Flip - Round Driver

Runs one complete round against a table: ante, every seat's pick, the roll,
settlement. Used by the UI's auto-play and by simulations; interactive play
calls the engine operations one at a time instead.
"""

from __future__ import annotations

import logging
from typing import Sequence

from src.engine.base import Rejected, RoundResolved
from src.engine.roll_source import RollSource
from src.engine.wager_round import WagerRoundEngine

logger = logging.getLogger(__name__)


def play_round(
    engine: WagerRoundEngine,
    picks: Sequence[int],
    roll_source: RollSource,
) -> RoundResolved | Rejected:
    """Play one full round.

    Args:
        engine: Table to play on
        picks: One face per seat, in seat order
        roll_source: Supplies the rolled face once every seat has committed

    Returns:
        The settlement, or the first rejection encountered. The roll source
        is only consulted after every pick was accepted.

    Raises:
        ValueError: If the number of picks does not match the seat count
    """
    if len(picks) != engine.player_count:
        raise ValueError(
            f"Expected {engine.player_count} picks, got {len(picks)}."
        )

    started = engine.start_round()
    if not started.ok:
        return started

    for index, pick in enumerate(picks):
        accepted = engine.pick_number(index, pick)
        if not accepted.ok:
            return accepted

    rolled = roll_source.roll()
    logger.debug("Roll source produced %d", rolled)
    return engine.resolve(rolled)


def play_rounds(
    engine: WagerRoundEngine,
    picks: Sequence[Sequence[int]],
    roll_source: RollSource,
) -> list[RoundResolved | Rejected]:
    """Play consecutive rounds, stopping after the first rejection."""
    results: list[RoundResolved | Rejected] = []
    for round_picks in picks:
        result = play_round(engine, round_picks, roll_source)
        results.append(result)
        if not result.ok:
            break
    return results
