"""
Quantum Flip - Input Validation Utilities

Provides validation functions for engine configuration and operation inputs.
The ``validate_*`` functions either return validated data or raise descriptive
ValueError exceptions; the ``is_*`` predicates are used by table operations,
which report bad input instead of raising.
"""

from typing import Any, Sequence


DIE_FACES = 6


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid face or seat
    return isinstance(value, int) and not isinstance(value, bool)


def is_face_value(value: Any) -> bool:
    """True if ``value`` is an integer face of a D6 (1-6)."""
    return _is_int(value) and 1 <= value <= DIE_FACES


def is_player_index(value: Any, player_count: int) -> bool:
    """True if ``value`` addresses an existing seat."""
    return _is_int(value) and 0 <= value < player_count


def validate_player_names(names: Sequence[str]) -> tuple[str, ...]:
    """
    Validate seat names.

    Args:
        names: Sequence of player names, in seat order

    Returns:
        Validated names as a tuple

    Raises:
        ValueError: If there are no names, a name is blank, or names repeat
    """
    if isinstance(names, str):
        raise ValueError("Player names must be a sequence of names, not a single string.")

    names_tuple = tuple(names)
    if not names_tuple:
        raise ValueError("At least 1 player required.")

    for i, name in enumerate(names_tuple):
        if not isinstance(name, str):
            raise ValueError(f"Player name at index {i} must be a string, got {type(name).__name__}.")
        if not name.strip():
            raise ValueError(f"Player name at index {i} is blank.")

    if len(set(names_tuple)) != len(names_tuple):
        raise ValueError(f"Player names must be unique, got {list(names_tuple)}.")

    return names_tuple


def validate_positive_amount(amount: int, label: str = "Amount") -> int:
    """
    Validate a strictly positive currency amount.

    Raises:
        ValueError: If amount is not an integer or is not positive
    """
    if not _is_int(amount):
        raise ValueError(f"{label} must be an integer, got {type(amount).__name__}.")

    if amount <= 0:
        raise ValueError(f"{label} must be positive, got {amount}.")

    return amount


def validate_min_bet_increase(increase: int) -> int:
    """Validate the escalation increment (zero disables escalation)."""
    if not _is_int(increase):
        raise ValueError(f"Minimum bet increase must be an integer, got {type(increase).__name__}.")

    if increase < 0:
        raise ValueError(f"Minimum bet increase cannot be negative, got {increase}.")

    return increase


def validate_rounds_per_step(rounds: int) -> int:
    """Validate the number of resolved rounds between escalations."""
    if not _is_int(rounds):
        raise ValueError(f"Rounds per step must be an integer, got {type(rounds).__name__}.")

    if rounds <= 0:
        raise ValueError(f"Rounds per step must be positive, got {rounds}.")

    return rounds

