"""UI components for Quantum Flip."""

from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.turn_controls import render_pick_buttons, render_turn_controls

__all__ = [
    "render_scoreboard",
    "render_pick_buttons",
    "render_turn_controls",
]
