"""
Quantum Flip - Table Event Definitions

Event types and payloads emitted by the wager engine after each state change,
plus the listener registry the engine dispatches them through.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable

logger = logging.getLogger(__name__)


class TableEvent(Enum):
    """Events that can occur at a table."""

    ROUND_STARTED = auto()
    PICK_COMMITTED = auto()
    PICK_LOCKED = auto()
    PICK_CLEARED = auto()
    ALL_COMMITTED = auto()
    ROUND_RESOLVED = auto()
    JACKPOT_CARRIED = auto()
    MIN_BET_RAISED = auto()
    PLAYER_BOOTED = auto()
    TABLE_RESET = auto()


@dataclass
class EventPayload:
    """Wrapper for table event data."""

    event: TableEvent
    round: int
    player: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


Listener = Callable[[EventPayload], None]


class EventEmitter:
    """Synchronous fan-out of table events to registered listeners.

    Listener failures are logged and never interrupt the engine: by the time
    an event is emitted the state change it describes has already happened.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener.

        Returns:
            A callable that removes the listener again.
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def emit(self, payload: EventPayload) -> None:
        """Deliver ``payload`` to every listener in registration order."""
        for listener in list(self._listeners):
            try:
                listener(payload)
            except Exception:
                logger.exception("Error in listener for %s", payload.event.name)
