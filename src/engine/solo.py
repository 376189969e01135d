"""
Quantum Flip - Solo Table

Single-seat specialization of the wager engine. With one seat the pot rule
reduces to: a hit pays back the ante plus the whole jackpot, a miss adds the
ante to the jackpot. Failing to cover the ante boots the player from the
table; every later operation is refused with BOOTED until reset().
"""

from __future__ import annotations

from src.engine.base import PlayerSnapshot, Rejected, RoundStarted, TableConfig
from src.engine.wager_round import WagerRoundEngine


class SoloWagerEngine(WagerRoundEngine):
    """Wager engine for exactly one player, with the solo table defaults."""

    def __init__(self, config: TableConfig | None = None, *, name: str = "You") -> None:
        if config is None:
            config = TableConfig.solo(name)
        elif config.player_count != 1:
            raise ValueError(
                f"Solo table requires exactly 1 player, got {config.player_count}."
            )
        super().__init__(config)

    def begin_next_round(self) -> RoundStarted | Rejected:
        """Alias for start_round(), used between rounds by the HUD."""
        return self.start_round()

    @property
    def player(self) -> PlayerSnapshot:
        return self.get_state().players[0]

    @property
    def is_booted(self) -> bool:
        return self.get_state().is_booted
