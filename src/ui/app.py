"""Quantum Flip — Streamlit Application Entrypoint."""

from __future__ import annotations

import logging

import streamlit as st

from src.config import configure_logging, get_settings
from src.engine import (
    EventPayload,
    QuantumCube,
    SoloWagerEngine,
    TableEvent,
    WagerRoundEngine,
)

logger = logging.getLogger(__name__)


_RULES = """\
**Goal:** Call the face the cube lands on.

- Every player pays the **ante** into the pot to start a round
- Each player picks a face, 1-6 (one pick per round)
- The cube is rolled once everyone has picked
- Winners split the pot (antes + jackpot) evenly
- Nobody hit? The whole pot carries over as the **jackpot**
- Odd amounts left over from a split stay in the jackpot
- The ante rises every few rounds
"""

_TOAST_EVENTS = {
    TableEvent.MIN_BET_RAISED: "Ante raised to {new}!",
    TableEvent.JACKPOT_CARRIED: "Jackpot carries: {jackpot}",
    TableEvent.PLAYER_BOOTED: "Booted from the table.",
}


def _new_engine() -> WagerRoundEngine:
    """Build an engine from settings and hook its events into the session."""
    config = get_settings().table_config()
    engine = SoloWagerEngine(config) if config.player_count == 1 else WagerRoundEngine(config)

    def _queue_toast(payload: EventPayload) -> None:
        template = _TOAST_EVENTS.get(payload.event)
        if template:
            st.session_state.setdefault("_toasts", []).append(template.format(**payload.data))

    engine.subscribe(_queue_toast)
    return engine


def _handle_action(engine: WagerRoundEngine, cube: QuantumCube, action: str) -> None:
    ss = st.session_state
    if action == "start":
        if isinstance(engine, SoloWagerEngine):
            result = engine.begin_next_round()
        else:
            result = engine.start_round()
    elif action == "lock":
        result = engine.lock_pick()
    elif action == "roll":
        rolled = cube.spin()
        result = engine.resolve(rolled)
    elif action == "reset":
        cube.reset_rotation()
        result = engine.reset()
    else:
        return

    if not result.ok:
        ss["_flash"] = str(result)
    st.rerun()


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Quantum Flip",
        page_icon="🎲",
        layout="centered",
    )
    configure_logging(get_settings())

    from src.ui.components import (
        render_pick_buttons,
        render_scoreboard,
        render_turn_controls,
    )

    ss = st.session_state
    if "engine" not in ss:
        ss["engine"] = _new_engine()
        ss["cube"] = QuantumCube()
        logger.info("New table session with %d player(s)", ss["engine"].player_count)

    engine: WagerRoundEngine = ss["engine"]
    cube: QuantumCube = ss["cube"]

    st.title("Quantum Flip")

    for message in ss.pop("_toasts", []):
        st.toast(message)
    flash = ss.pop("_flash", None)
    if flash:
        st.warning(flash)

    state = engine.get_state()
    render_scoreboard(state)
    st.divider()

    for index in range(len(state.players)):
        face = render_pick_buttons(state, index)
        if face is not None:
            result = engine.pick_number(index, face)
            if not result.ok:
                ss["_flash"] = str(result)
            st.rerun()

    if isinstance(engine, SoloWagerEngine) and state.round_active:
        player = state.players[0]
        if player.committed and not player.locked:
            if st.button("Lock pick", key=f"btn_lock_{state.round}"):
                _handle_action(engine, cube, "lock")

    action = render_turn_controls(state)
    if action:
        _handle_action(engine, cube, action)

    with st.sidebar:
        st.markdown("### How to play")
        st.markdown(_RULES)


if __name__ == "__main__":
    main()
