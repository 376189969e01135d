"""
Quantum Flip - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the wager engine. Configuration, snapshots and operation results are immutable
(frozen dataclasses) so that nothing handed out by the engine can be used to
mutate its internals.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar

from src.engine.validators import (
    DIE_FACES,
    validate_min_bet_increase,
    validate_player_names,
    validate_positive_amount,
    validate_rounds_per_step,
)


class RoundPhase(Enum):
    """Lifecycle of a single round at the table."""
    IDLE = auto()       # No round played yet (or just reset)
    ACTIVE = auto()     # Antes taken, waiting for picks
    COMMITTED = auto()  # Every player has committed, waiting for the roll
    RESOLVED = auto()   # Last round paid out, next round may start
    BOOTED = auto()     # Terminal: could not afford the ante


class Outcome(Enum):
    """Per-player classification of a resolved round."""
    WIN = "WIN"
    MISS = "MISS"


class FailureReason(Enum):
    """Why an engine operation was rejected."""
    ROUND_ALREADY_ACTIVE = "ROUND_ALREADY_ACTIVE"
    PLAYER_BROKE = "PLAYER_BROKE"
    NO_ACTIVE_ROUND = "NO_ACTIVE_ROUND"
    INVALID_PLAYER = "INVALID_PLAYER"
    INVALID_PICK = "INVALID_PICK"
    ALREADY_COMMITTED = "ALREADY_COMMITTED"
    PICK_LOCKED = "PICK_LOCKED"
    INVALID_ROLL = "INVALID_ROLL"
    NOT_ALL_COMMITTED = "NOT_ALL_COMMITTED"
    NO_PICK = "NO_PICK"
    BOOTED = "BOOTED"


@dataclass(frozen=True)
class TableConfig:
    """
    Configuration for a table session.

    Attributes:
        players: Seat names, in seat order (at least one, unique)
        starting_bankroll: Bankroll every player starts with
        starting_min_bet: Ante required in the first round
        min_bet_increase: Amount the ante grows at each escalation step
        rounds_per_step: Resolved rounds between escalations
        boot_when_broke: Move to the terminal BOOTED phase when a player
            cannot afford the ante (solo table behavior)
    """
    players: tuple[str, ...] = ("P1", "P2")
    starting_bankroll: int = 200
    starting_min_bet: int = 10
    min_bet_increase: int = 5
    rounds_per_step: int = 5
    boot_when_broke: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        # Accept any sequence of names but always store a tuple
        object.__setattr__(self, "players", validate_player_names(self.players))
        validate_positive_amount(self.starting_bankroll, "Starting bankroll")
        validate_positive_amount(self.starting_min_bet, "Starting minimum bet")
        validate_min_bet_increase(self.min_bet_increase)
        validate_rounds_per_step(self.rounds_per_step)

    @property
    def player_count(self) -> int:
        return len(self.players)

    @classmethod
    def solo(cls, name: str = "You", **overrides: Any) -> "TableConfig":
        """Single-seat configuration with the solo table defaults."""
        values: dict[str, Any] = {
            "players": (name,),
            "starting_bankroll": 100,
            "starting_min_bet": 20,
            "min_bet_increase": 10,
            "rounds_per_step": 3,
            "boot_when_broke": True,
        }
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class PlayerSnapshot:
    """
    Read-only view of one seat.

    Attributes:
        name: Seat name, unique within the table
        bankroll: Current balance
        pick: Committed face for the current round, if any
        committed: Whether the player has committed this round
        locked: Whether the pick is explicitly locked until resolution
    """
    name: str
    bankroll: int
    pick: int | None = None
    committed: bool = False
    locked: bool = False


@dataclass(frozen=True)
class OutcomeRecord:
    """One player's result in the last resolved round."""
    name: str
    pick: int
    outcome: Outcome

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "pick": self.pick, "outcome": self.outcome.value}


@dataclass(frozen=True)
class TableSnapshot:
    """
    Complete, immutable state of a table.

    Attributes:
        players: Seats in seat order
        min_bet: Current ante
        jackpot: Carried balance from missed rounds and split remainders
        round: Number of resolved rounds
        phase: Current round phase
        last_result: Last rolled face, None before the first resolution
        last_outcomes: Per-player results of the last resolved round
        last_pot: Pot of the last resolved round, None before the first
    """
    players: tuple[PlayerSnapshot, ...]
    min_bet: int
    jackpot: int
    round: int
    phase: RoundPhase
    last_result: int | None = None
    last_outcomes: tuple[OutcomeRecord, ...] = field(default_factory=tuple)
    last_pot: int | None = None

    @property
    def round_active(self) -> bool:
        """True between a successful start and the matching resolve."""
        return self.phase in (RoundPhase.ACTIVE, RoundPhase.COMMITTED)

    @property
    def is_booted(self) -> bool:
        return self.phase is RoundPhase.BOOTED

    @property
    def all_committed(self) -> bool:
        return all(p.committed for p in self.players)

    @property
    def total_currency(self) -> int:
        """Sum of all bankrolls plus the jackpot, excluding antes in play."""
        return sum(p.bankroll for p in self.players) + self.jackpot

    def player(self, name: str) -> PlayerSnapshot:
        """Look up a seat by name."""
        for p in self.players:
            if p.name == name:
                return p
        raise KeyError(name)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict copy for rendering."""
        return {
            "players": [
                {
                    "name": p.name,
                    "bankroll": p.bankroll,
                    "pick": p.pick,
                    "committed": p.committed,
                    "locked": p.locked,
                }
                for p in self.players
            ],
            "min_bet": self.min_bet,
            "jackpot": self.jackpot,
            "round": self.round,
            "round_active": self.round_active,
            "phase": self.phase.name,
            "last_result": self.last_result,
            "last_outcomes": [o.to_dict() for o in self.last_outcomes],
            "last_pot": self.last_pot,
        }


# =============================================================================
# OPERATION RESULTS
# =============================================================================

@dataclass(frozen=True)
class Rejected:
    """
    A recoverable refusal. No bankroll, pick or jackpot was changed.

    Attributes:
        reason: Why the operation was refused
        player: Seat responsible, when the refusal concerns one player
    """
    ok: ClassVar[bool] = False

    reason: FailureReason
    player: str | None = None

    def __str__(self) -> str:
        if self.player is not None:
            return f"{self.reason.value} ({self.player})"
        return self.reason.value


@dataclass(frozen=True)
class RoundStarted:
    """Antes were collected from every seat."""
    ok: ClassVar[bool] = True

    min_bet: int
    round: int


@dataclass(frozen=True)
class PickAccepted:
    """
    A seat committed its pick.

    Attributes:
        player: Seat that committed
        pick: Committed face
        all_committed: Whether this commit completed the table (roll trigger)
    """
    ok: ClassVar[bool] = True

    player: str
    pick: int
    all_committed: bool


@dataclass(frozen=True)
class PickLocked:
    ok: ClassVar[bool] = True

    player: str
    pick: int


@dataclass(frozen=True)
class PickCleared:
    ok: ClassVar[bool] = True

    player: str


@dataclass(frozen=True)
class RoundResolved:
    """
    Settlement of a round.

    Attributes:
        rolled: Face supplied by the roll source
        winners: Names of players whose pick matched, in seat order
        jackpot: Jackpot after settlement
        min_bet: Ante for the next round (after any escalation)
        round: Resolved round count
        pot: Antes plus carried jackpot that were at stake
        share: Amount paid to each winner (0 when nobody won)
        outcomes: Per-player WIN/MISS records
    """
    ok: ClassVar[bool] = True

    rolled: int
    winners: tuple[str, ...]
    jackpot: int
    min_bet: int
    round: int
    pot: int
    share: int
    outcomes: tuple[OutcomeRecord, ...]

    @property
    def has_winners(self) -> bool:
        return len(self.winners) > 0


@dataclass(frozen=True)
class TableReset:
    ok: ClassVar[bool] = True


OperationResult = (
    Rejected | RoundStarted | PickAccepted | PickLocked | PickCleared
    | RoundResolved | TableReset
)
