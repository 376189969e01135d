"""
Quantum Flip Game Engine.

Pure Python wager logic with zero UI dependencies.
Handles antes, pick commitment, pot settlement, jackpot carry and escalation.
"""

from src.engine.base import (
    DIE_FACES,
    FailureReason,
    Outcome,
    OutcomeRecord,
    PickAccepted,
    PickCleared,
    PickLocked,
    PlayerSnapshot,
    Rejected,
    RoundPhase,
    RoundResolved,
    RoundStarted,
    TableConfig,
    TableReset,
    TableSnapshot,
)
from src.engine.events import EventPayload, TableEvent
from src.engine.roll_source import QuantumCube, RandomRollSource, RollSource
from src.engine.solo import SoloWagerEngine
from src.engine.table import play_round, play_rounds
from src.engine.wager_round import WagerRoundEngine

__all__ = [
    "DIE_FACES",
    # Data Classes
    "TableConfig",
    "TableSnapshot",
    "PlayerSnapshot",
    "OutcomeRecord",
    "EventPayload",
    # Results
    "Rejected",
    "RoundStarted",
    "PickAccepted",
    "PickLocked",
    "PickCleared",
    "RoundResolved",
    "TableReset",
    # Enums
    "FailureReason",
    "Outcome",
    "RoundPhase",
    "TableEvent",
    # Engines
    "WagerRoundEngine",
    "SoloWagerEngine",
    # Roll sources
    "RollSource",
    "RandomRollSource",
    "QuantumCube",
    # Driver
    "play_round",
    "play_rounds",
]
