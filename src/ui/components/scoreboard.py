"""Scoreboard component — bankrolls, ante, jackpot and last outcomes."""

from __future__ import annotations

import html

import streamlit as st

from src.engine.base import Outcome, PlayerSnapshot, TableSnapshot

_SCOREBOARD_CSS = """
<style>
.scoreboard { display: flex; flex-direction: column; gap: 0.25rem; }
.player-row { display: flex; justify-content: space-between; padding: 0.4rem 0.75rem;
              border-radius: 0.4rem; background: rgba(128, 128, 128, 0.12); }
.player-row.winner { background: rgba(46, 160, 67, 0.25); font-weight: 600; }
.player-row .status { opacity: 0.75; font-style: italic; }
</style>
"""


def _player_status(state: TableSnapshot, player: PlayerSnapshot) -> str:
    if state.round_active:
        if player.locked:
            return "locked"
        return "committed" if player.committed else "picking"
    for record in state.last_outcomes:
        if record.name == player.name:
            return f"{record.outcome.value} on {record.pick}"
    return ""


def render_scoreboard(state: TableSnapshot) -> None:
    """Render the table HUD from an engine snapshot.

    Args:
        state: Snapshot returned by ``engine.get_state()``.
    """
    cols = st.columns(3)
    cols[0].metric("Round", state.round)
    cols[1].metric("Ante", state.min_bet)
    cols[2].metric("Jackpot", state.jackpot)

    winners = {o.name for o in state.last_outcomes if o.outcome is Outcome.WIN}

    rows = [_SCOREBOARD_CSS, '<div class="scoreboard">']
    for player in state.players:
        row_classes = ["player-row"]
        if not state.round_active and player.name in winners:
            row_classes.append("winner")

        rows.append(
            f'<div class="{" ".join(row_classes)}">'
            f'<span class="name">{html.escape(player.name)}</span>'
            f'<span class="score">{player.bankroll}</span>'
            f'<span class="status">{_player_status(state, player)}</span>'
            f"</div>"
        )
    rows.append("</div>")
    st.markdown("".join(rows), unsafe_allow_html=True)

    if state.last_result is not None and not state.round_active:
        st.caption(f"Last roll: **{state.last_result}** (pot {state.last_pot})")
