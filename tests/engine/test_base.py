"""
Quantum Flip - Base Classes Tests

Tests for dataclasses, enums, and validation utilities.
"""

import dataclasses

import pytest
from src.engine.base import (
    FailureReason,
    Outcome,
    OutcomeRecord,
    PlayerSnapshot,
    Rejected,
    RoundPhase,
    RoundResolved,
    TableConfig,
    TableSnapshot,
)
from src.engine.validators import (
    is_face_value,
    is_player_index,
    validate_min_bet_increase,
    validate_player_names,
    validate_positive_amount,
    validate_rounds_per_step,
)


class TestFailureReason:
    """Tests for FailureReason enum."""

    def test_all_reasons_defined(self):
        expected = {
            "ROUND_ALREADY_ACTIVE", "PLAYER_BROKE", "NO_ACTIVE_ROUND",
            "INVALID_PLAYER", "INVALID_PICK", "ALREADY_COMMITTED",
            "PICK_LOCKED", "INVALID_ROLL", "NOT_ALL_COMMITTED", "NO_PICK",
            "BOOTED",
        }
        assert {r.name for r in FailureReason} == expected

    def test_values_match_names(self):
        for reason in FailureReason:
            assert reason.value == reason.name


class TestOutcome:
    def test_values(self):
        assert Outcome.WIN.value == "WIN"
        assert Outcome.MISS.value == "MISS"


class TestTableConfig:
    """Tests for TableConfig validation."""

    def test_defaults(self):
        config = TableConfig()
        assert config.players == ("P1", "P2")
        assert config.starting_bankroll == 200
        assert config.starting_min_bet == 10
        assert config.min_bet_increase == 5
        assert config.rounds_per_step == 5
        assert config.boot_when_broke is False

    def test_players_list_stored_as_tuple(self):
        config = TableConfig(players=["A", "B", "C"])
        assert config.players == ("A", "B", "C")
        assert config.player_count == 3

    def test_single_player_allowed(self):
        assert TableConfig(players=("Solo",)).player_count == 1

    def test_solo_defaults(self):
        config = TableConfig.solo()
        assert config.players == ("You",)
        assert config.starting_bankroll == 100
        assert config.starting_min_bet == 20
        assert config.min_bet_increase == 10
        assert config.rounds_per_step == 3
        assert config.boot_when_broke is True

    def test_solo_overrides(self):
        config = TableConfig.solo("Ada", starting_bankroll=50)
        assert config.players == ("Ada",)
        assert config.starting_bankroll == 50

    def test_frozen(self):
        config = TableConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.starting_bankroll = 1

    def test_empty_players_raises(self):
        with pytest.raises(ValueError, match="At least 1 player"):
            TableConfig(players=())

    def test_duplicate_players_raises(self):
        with pytest.raises(ValueError, match="unique"):
            TableConfig(players=("A", "A"))

    def test_blank_player_raises(self):
        with pytest.raises(ValueError, match="blank"):
            TableConfig(players=("A", "  "))

    @pytest.mark.parametrize("bankroll", [0, -10])
    def test_non_positive_bankroll_raises(self, bankroll):
        with pytest.raises(ValueError, match="Starting bankroll must be positive"):
            TableConfig(starting_bankroll=bankroll)

    def test_non_positive_min_bet_raises(self):
        with pytest.raises(ValueError, match="Starting minimum bet must be positive"):
            TableConfig(starting_min_bet=0)

    def test_negative_increase_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            TableConfig(min_bet_increase=-1)

    def test_zero_increase_allowed(self):
        assert TableConfig(min_bet_increase=0).min_bet_increase == 0

    def test_zero_rounds_per_step_raises(self):
        with pytest.raises(ValueError, match="Rounds per step must be positive"):
            TableConfig(rounds_per_step=0)

    def test_float_bankroll_raises(self):
        with pytest.raises(ValueError, match="must be an integer"):
            TableConfig(starting_bankroll=100.5)


class TestTableSnapshot:
    """Tests for TableSnapshot derived properties."""

    def _snapshot(self, phase=RoundPhase.IDLE, **kwargs):
        players = (
            PlayerSnapshot(name="P1", bankroll=190, pick=3, committed=True),
            PlayerSnapshot(name="P2", bankroll=185),
        )
        return TableSnapshot(players=players, min_bet=10, jackpot=7, round=2, phase=phase, **kwargs)

    @pytest.mark.parametrize("phase,active", [
        (RoundPhase.IDLE, False),
        (RoundPhase.ACTIVE, True),
        (RoundPhase.COMMITTED, True),
        (RoundPhase.RESOLVED, False),
        (RoundPhase.BOOTED, False),
    ])
    def test_round_active(self, phase, active):
        assert self._snapshot(phase).round_active is active

    def test_total_currency(self):
        assert self._snapshot().total_currency == 190 + 185 + 7

    def test_all_committed(self):
        assert self._snapshot().all_committed is False

    def test_player_lookup(self):
        assert self._snapshot().player("P2").bankroll == 185

    def test_player_lookup_unknown(self):
        with pytest.raises(KeyError):
            self._snapshot().player("nobody")

    def test_to_dict(self):
        outcomes = (OutcomeRecord("P1", 3, Outcome.WIN), OutcomeRecord("P2", 5, Outcome.MISS))
        data = self._snapshot(RoundPhase.RESOLVED, last_result=3, last_outcomes=outcomes, last_pot=20).to_dict()
        assert data["phase"] == "RESOLVED"
        assert data["round_active"] is False
        assert data["players"][0] == {
            "name": "P1", "bankroll": 190, "pick": 3, "committed": True, "locked": False,
        }
        assert data["last_outcomes"] == [
            {"name": "P1", "pick": 3, "outcome": "WIN"},
            {"name": "P2", "pick": 5, "outcome": "MISS"},
        ]
        assert data["last_pot"] == 20

    def test_frozen(self):
        snap = self._snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.jackpot = 100
        with pytest.raises(dataclasses.FrozenInstanceError):
            snap.players[0].bankroll = 1_000_000


class TestResults:
    """Tests for operation result classes."""

    def test_rejected_not_ok(self):
        result = Rejected(FailureReason.PLAYER_BROKE, player="P2")
        assert result.ok is False
        assert str(result) == "PLAYER_BROKE (P2)"

    def test_rejected_without_player(self):
        assert str(Rejected(FailureReason.NO_ACTIVE_ROUND)) == "NO_ACTIVE_ROUND"

    def test_resolved_ok(self):
        result = RoundResolved(
            rolled=4, winners=(), jackpot=20, min_bet=10, round=1,
            pot=20, share=0, outcomes=(),
        )
        assert result.ok is True
        assert result.has_winners is False


class TestValidators:
    """Tests for input validation helpers."""

    @pytest.mark.parametrize("value", [1, 2, 3, 4, 5, 6])
    def test_valid_faces(self, value):
        assert is_face_value(value)

    @pytest.mark.parametrize("value", [0, 7, -1, 3.0, "3", None, True])
    def test_invalid_faces(self, value):
        assert not is_face_value(value)

    def test_player_index(self):
        assert is_player_index(0, 2)
        assert is_player_index(1, 2)
        assert not is_player_index(2, 2)
        assert not is_player_index(-1, 2)
        assert not is_player_index(1.0, 2)
        assert not is_player_index(False, 2)

    def test_player_names_rejects_string(self):
        with pytest.raises(ValueError, match="not a single string"):
            validate_player_names("P1")

    def test_player_names_rejects_non_string(self):
        with pytest.raises(ValueError, match="must be a string"):
            validate_player_names(["P1", 2])

    def test_positive_amount(self):
        assert validate_positive_amount(5) == 5
        with pytest.raises(ValueError, match="Ante must be positive"):
            validate_positive_amount(0, "Ante")

    def test_min_bet_increase(self):
        assert validate_min_bet_increase(0) == 0
        with pytest.raises(ValueError):
            validate_min_bet_increase(-5)

    def test_rounds_per_step(self):
        assert validate_rounds_per_step(3) == 3
        with pytest.raises(ValueError):
            validate_rounds_per_step(-3)
