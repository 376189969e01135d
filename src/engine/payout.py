"""
Quantum Flip - Payout and Escalation Math

Pure functions for settling a round. Every round's pot is the antes of all
seats plus the carried jackpot; winners split it evenly and whatever does not
divide evenly stays in the jackpot. With no winners the whole pot carries.

Since every unit of the pot ends up either in a winner's bankroll or in the
jackpot, the sum of bankrolls plus jackpot is the same after settlement as it
was before the antes were taken.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Settlement:
    """
    Money movement for one resolved round.

    Attributes:
        pot: Antes plus carried jackpot at stake
        share: Amount credited to each winner (0 with no winners)
        jackpot: Jackpot after settlement
    """
    pot: int
    share: int
    jackpot: int

    @property
    def paid_out(self) -> int:
        """Total amount credited to winners."""
        return self.pot - self.jackpot


def compute_pot(min_bet: int, player_count: int, jackpot: int) -> int:
    """Antes of every seat plus the carried jackpot."""
    return min_bet * player_count + jackpot


def settle(pot: int, winner_count: int) -> Settlement:
    """
    Split a pot among winners.

    Args:
        pot: Total at stake
        winner_count: Number of winning seats (0 = nobody matched)

    Returns:
        Settlement with per-winner share and the new jackpot

    Example:
        >>> settle(17, 3)
        Settlement(pot=17, share=5, jackpot=2)
    """
    if winner_count < 0:
        raise ValueError(f"Winner count cannot be negative, got {winner_count}.")

    if winner_count == 0:
        return Settlement(pot=pot, share=0, jackpot=pot)

    share = pot // winner_count
    remainder = pot - share * winner_count
    return Settlement(pot=pot, share=share, jackpot=remainder)


def is_escalation_round(round_number: int, rounds_per_step: int) -> bool:
    """True if the ante rises after resolving ``round_number``."""
    return round_number > 0 and round_number % rounds_per_step == 0


def min_bet_after_round(
    min_bet: int,
    round_number: int,
    rounds_per_step: int,
    increase: int,
) -> int:
    """Ante for the next round once ``round_number`` has been resolved."""
    if is_escalation_round(round_number, rounds_per_step):
        return min_bet + increase
    return min_bet
