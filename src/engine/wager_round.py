"""
Quantum Flip - Wager Round Engine

Owns the state of one table: bankrolls, ante, jackpot, round counter and each
seat's pick. A round runs IDLE/RESOLVED -> ACTIVE -> COMMITTED -> RESOLVED:

- start_round(): every seat pays the ante (all or none)
- pick_number(): each seat commits one face, once per round
- resolve(rolled): the pot is split among seats that picked ``rolled``

The engine never rolls the die itself; the rolled face is supplied by the
caller. Recoverable problems (out-of-order calls, bad input, a seat that
cannot afford the ante) are returned as ``Rejected`` results and never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from src.engine.base import (
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
from src.engine.events import EventEmitter, EventPayload, Listener, TableEvent
from src.engine.payout import compute_pot, min_bet_after_round, settle
from src.engine.validators import is_face_value, is_player_index

logger = logging.getLogger(__name__)


# Phase transitions taken by round operations. reset() bypasses this table.
_TRANSITIONS: dict[RoundPhase, frozenset[RoundPhase]] = {
    RoundPhase.IDLE: frozenset({RoundPhase.ACTIVE, RoundPhase.BOOTED}),
    RoundPhase.ACTIVE: frozenset({RoundPhase.COMMITTED}),
    RoundPhase.COMMITTED: frozenset({RoundPhase.RESOLVED}),
    RoundPhase.RESOLVED: frozenset({RoundPhase.ACTIVE, RoundPhase.BOOTED}),
    RoundPhase.BOOTED: frozenset(),
}


@dataclass
class PlayerState:
    """Mutable per-seat state, private to the engine."""
    name: str
    bankroll: int
    pick: int | None = None
    committed: bool = False
    locked: bool = False

    def clear_round(self) -> None:
        self.pick = None
        self.committed = False
        self.locked = False

    def snapshot(self) -> PlayerSnapshot:
        return PlayerSnapshot(
            name=self.name,
            bankroll=self.bankroll,
            pick=self.pick,
            committed=self.committed,
            locked=self.locked,
        )


class WagerRoundEngine:
    """
    Round/wager settlement engine for one table.

    All operations are synchronous and atomic: they either apply completely
    or return a ``Rejected`` result without touching any balance.
    """

    def __init__(self, config: TableConfig | None = None) -> None:
        self._config = config if config is not None else TableConfig()
        self._events = EventEmitter()
        self._init_state()

    def _init_state(self) -> None:
        cfg = self._config
        self._players = [
            PlayerState(name=name, bankroll=cfg.starting_bankroll)
            for name in cfg.players
        ]
        self._min_bet = cfg.starting_min_bet
        self._jackpot = 0
        self._round = 0
        self._round_ante = 0
        self._phase = RoundPhase.IDLE
        self._last_result: int | None = None
        self._last_outcomes: tuple[OutcomeRecord, ...] = ()
        self._last_pot: int | None = None

    # -- Properties ------------------------------------------------------

    @property
    def config(self) -> TableConfig:
        return self._config

    @property
    def phase(self) -> RoundPhase:
        return self._phase

    @property
    def round_active(self) -> bool:
        return self._phase in (RoundPhase.ACTIVE, RoundPhase.COMMITTED)

    @property
    def player_count(self) -> int:
        return len(self._players)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a table event listener; returns an unsubscribe callable."""
        return self._events.subscribe(listener)

    # -- Round control ---------------------------------------------------

    def start_round(self) -> RoundStarted | Rejected:
        """Collect the ante from every seat and open a round.

        Fails with ROUND_ALREADY_ACTIVE while a round is open, and with
        PLAYER_BROKE (naming the first seat that cannot pay) when any seat's
        bankroll is below the ante. A broke seat is detected before anything
        is debited, so either every seat pays or none does.
        """
        if self._phase is RoundPhase.BOOTED:
            return self._reject(FailureReason.BOOTED)
        if self.round_active:
            return self._reject(FailureReason.ROUND_ALREADY_ACTIVE)

        ante = self._min_bet
        for p in self._players:
            if p.bankroll < ante:
                if self._config.boot_when_broke:
                    self._boot(p.name)
                return self._reject(FailureReason.PLAYER_BROKE, p.name)

        for p in self._players:
            p.bankroll -= ante
            p.clear_round()

        self._round_ante = ante
        self._last_outcomes = ()
        self._transition(RoundPhase.ACTIVE)

        logger.info(
            "Round %d started: ante %d from %d player(s), jackpot %d",
            self._round + 1, ante, len(self._players), self._jackpot,
        )
        self._emit(TableEvent.ROUND_STARTED, data={"ante": ante, "jackpot": self._jackpot})
        return RoundStarted(min_bet=ante, round=self._round + 1)

    def pick_number(self, player_index: int, n: int) -> PickAccepted | Rejected:
        """Commit seat ``player_index`` to face ``n`` for the open round.

        A commit is write-once: a second pick in the same round is rejected
        with ALREADY_COMMITTED (or PICK_LOCKED when the seat locked its pick)
        and the stored pick is left alone.
        """
        if self._phase is RoundPhase.BOOTED:
            return self._reject(FailureReason.BOOTED)
        if not self.round_active:
            return self._reject(FailureReason.NO_ACTIVE_ROUND)
        if not is_player_index(player_index, len(self._players)):
            return self._reject(FailureReason.INVALID_PLAYER)
        if not is_face_value(n):
            return self._reject(FailureReason.INVALID_PICK)

        p = self._players[player_index]
        if p.locked:
            return self._reject(FailureReason.PICK_LOCKED, p.name)
        if p.committed:
            return self._reject(FailureReason.ALREADY_COMMITTED, p.name)

        p.pick = n
        p.committed = True
        logger.debug("%s committed to %d", p.name, n)
        self._emit(TableEvent.PICK_COMMITTED, player=p.name, data={"pick": n})

        all_committed = all(x.committed for x in self._players)
        if all_committed:
            self._transition(RoundPhase.COMMITTED)
            self._emit(TableEvent.ALL_COMMITTED)

        return PickAccepted(player=p.name, pick=n, all_committed=all_committed)

    def lock_pick(self, player_index: int = 0) -> PickLocked | Rejected:
        """Lock a committed pick so it cannot be changed until resolution."""
        if self._phase is RoundPhase.BOOTED:
            return self._reject(FailureReason.BOOTED)
        if not self.round_active:
            return self._reject(FailureReason.NO_ACTIVE_ROUND)
        if not is_player_index(player_index, len(self._players)):
            return self._reject(FailureReason.INVALID_PLAYER)

        p = self._players[player_index]
        if p.locked:
            return self._reject(FailureReason.PICK_LOCKED, p.name)
        if p.pick is None:
            return self._reject(FailureReason.NO_PICK, p.name)

        p.locked = True
        logger.debug("%s locked pick %d", p.name, p.pick)
        self._emit(TableEvent.PICK_LOCKED, player=p.name, data={"pick": p.pick})
        return PickLocked(player=p.name, pick=p.pick)

    def clear_pick(self, player_index: int = 0) -> PickCleared | Rejected:
        """Forget a seat's last pick between rounds.

        Fails with ROUND_ALREADY_ACTIVE while a round is open: a committed
        seat keeps its pick until the round resolves.
        """
        if self._phase is RoundPhase.BOOTED:
            return self._reject(FailureReason.BOOTED)
        if self.round_active:
            return self._reject(FailureReason.ROUND_ALREADY_ACTIVE)
        if not is_player_index(player_index, len(self._players)):
            return self._reject(FailureReason.INVALID_PLAYER)

        p = self._players[player_index]
        p.pick = None
        self._emit(TableEvent.PICK_CLEARED, player=p.name)
        return PickCleared(player=p.name)

    def resolve(self, rolled: int) -> RoundResolved | Rejected:
        """Settle the open round against the rolled face.

        The pot (every seat's ante plus the carried jackpot) is split evenly
        among seats whose pick matches ``rolled``; the remainder of the split,
        or the whole pot when nobody matched, becomes the new jackpot. Every
        ``rounds_per_step`` resolved rounds the ante rises by
        ``min_bet_increase``.
        """
        if self._phase is RoundPhase.BOOTED:
            return self._reject(FailureReason.BOOTED)
        if not self.round_active:
            return self._reject(FailureReason.NO_ACTIVE_ROUND)
        if not is_face_value(rolled):
            return self._reject(FailureReason.INVALID_ROLL)
        for p in self._players:
            if not p.committed:
                return self._reject(FailureReason.NOT_ALL_COMMITTED, p.name)
        for p in self._players:
            if p.pick is None:
                return self._reject(FailureReason.NO_PICK, p.name)

        winners = [p for p in self._players if p.pick == rolled]
        pot = compute_pot(self._round_ante, len(self._players), self._jackpot)
        settlement = settle(pot, len(winners))

        for w in winners:
            w.bankroll += settlement.share
        self._jackpot = settlement.jackpot

        outcomes = tuple(
            OutcomeRecord(
                name=p.name,
                pick=p.pick,
                outcome=Outcome.WIN if p.pick == rolled else Outcome.MISS,
            )
            for p in self._players
        )
        self._last_outcomes = outcomes
        self._last_result = rolled
        self._last_pot = pot

        for p in self._players:
            p.locked = False

        self._transition(RoundPhase.RESOLVED)
        self._round += 1

        previous_min_bet = self._min_bet
        self._min_bet = min_bet_after_round(
            self._min_bet,
            self._round,
            self._config.rounds_per_step,
            self._config.min_bet_increase,
        )

        winner_names = tuple(w.name for w in winners)
        logger.info(
            "Round %d resolved: rolled %d, pot %d, winners %s, jackpot %d",
            self._round, rolled, pot, list(winner_names) or "none", self._jackpot,
        )
        self._emit(
            TableEvent.ROUND_RESOLVED,
            data={
                "rolled": rolled,
                "pot": pot,
                "share": settlement.share,
                "winners": list(winner_names),
            },
        )
        if self._jackpot > 0:
            self._emit(TableEvent.JACKPOT_CARRIED, data={"jackpot": self._jackpot})
        if self._min_bet != previous_min_bet:
            logger.info("Minimum bet raised from %d to %d", previous_min_bet, self._min_bet)
            self._emit(
                TableEvent.MIN_BET_RAISED,
                data={"old": previous_min_bet, "new": self._min_bet},
            )

        return RoundResolved(
            rolled=rolled,
            winners=winner_names,
            jackpot=self._jackpot,
            min_bet=self._min_bet,
            round=self._round,
            pot=pot,
            share=settlement.share,
            outcomes=outcomes,
        )

    # -- Reset / query ---------------------------------------------------

    def reset(self) -> TableReset:
        """Restore every field to its session-start value. Seats are kept."""
        self._init_state()
        logger.info("Table reset")
        self._emit(TableEvent.TABLE_RESET)
        return TableReset()

    def get_state(self) -> TableSnapshot:
        """Immutable snapshot of the table."""
        return TableSnapshot(
            players=tuple(p.snapshot() for p in self._players),
            min_bet=self._min_bet,
            jackpot=self._jackpot,
            round=self._round,
            phase=self._phase,
            last_result=self._last_result,
            last_outcomes=self._last_outcomes,
            last_pot=self._last_pot,
        )

    # -- Internals -------------------------------------------------------

    def _transition(self, target: RoundPhase) -> None:
        if target not in _TRANSITIONS[self._phase]:
            raise RuntimeError(
                f"Illegal phase transition {self._phase.name} -> {target.name}"
            )
        self._phase = target

    def _boot(self, player: str) -> None:
        self._transition(RoundPhase.BOOTED)
        logger.info("%s cannot cover the %d ante; table booted", player, self._min_bet)
        self._emit(TableEvent.PLAYER_BOOTED, player=player, data={"min_bet": self._min_bet})

    def _reject(self, reason: FailureReason, player: str | None = None) -> Rejected:
        logger.debug("Rejected: %s%s", reason.value, f" ({player})" if player else "")
        return Rejected(reason=reason, player=player)

    def _emit(
        self,
        event: TableEvent,
        player: str | None = None,
        data: dict | None = None,
    ) -> None:
        self._events.emit(EventPayload(
            event=event,
            round=self._round,
            player=player,
            data=data or {},
        ))
