"""Round control buttons — Ante Up, per-seat picks, Lock, Roll, Reset."""

from __future__ import annotations

import streamlit as st

from src.engine.base import DIE_FACES, TableSnapshot


def render_pick_buttons(state: TableSnapshot, player_index: int) -> int | None:
    """Render one row of face buttons for a seat.

    Returns:
        The face clicked, or ``None`` if no button was pressed.
    """
    player = state.players[player_index]
    disabled = not state.round_active or player.committed

    st.markdown(f"**{player.name}**" + (f" — picked {player.pick}" if player.pick else ""))
    cols = st.columns(DIE_FACES)
    for face, col in zip(range(1, DIE_FACES + 1), cols):
        with col:
            if st.button(
                str(face),
                key=f"pick_{player_index}_{face}_r{state.round}",
                use_container_width=True,
                disabled=disabled,
                type="primary" if player.pick == face else "secondary",
            ):
                return face
    return None


def render_turn_controls(state: TableSnapshot) -> str | None:
    """Render contextual round-action buttons.

    Returns:
        ``"start"``, ``"roll"``, ``"reset"``, or ``None`` if no action taken.
    """
    if state.is_booted:
        st.error("Out of room: you can't cover the ante.")
        if st.button("Back to the lobby", key="btn_reset_booted", type="primary"):
            return "reset"
        return None

    cols = st.columns(3)

    with cols[0]:
        if st.button(
            f"Ante Up ({state.min_bet})",
            key=f"btn_start_{state.round}",
            use_container_width=True,
            disabled=state.round_active,
            type="primary",
        ):
            return "start"

    with cols[1]:
        can_roll = state.round_active and state.all_committed
        if st.button(
            "Roll the Cube",
            key=f"btn_roll_{state.round}",
            use_container_width=True,
            disabled=not can_roll,
        ):
            return "roll"

    with cols[2]:
        if st.button("Reset Table", key="btn_reset", use_container_width=True):
            return "reset"

    return None
