"""
Study page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import dispatch
from app.state import load_dataset
from app.ui import (
    render_plant_back,
    render_plant_details,
    render_plant_front,
    render_session_complete,
    render_session_stats,
    render_study_settings,
)
from core.study_session import (
    Intent,
    Phase,
    current_card,
    progress,
    session_summary,
)


def render_study_page() -> None:
    """
    Render the study flow (settings, active card, or summary).
    """
    state = st.session_state.study_state
    plants = load_dataset()

    if state.phase.kind == Phase.COMPLETE:
        _render_complete_screen()
        return

    st.title("🌿 Flashcards")
    render_study_settings(state, plants)

    if state.phase.kind == Phase.SETUP:
        st.caption("Select categories and settings, then click **Start Session**.")
        return

    _render_active_session()


def _render_complete_screen() -> None:
    state = st.session_state.study_state
    st.title("Session Complete")
    render_session_complete(session_summary(state, load_dataset()))

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Restart Session", type="primary", width="stretch"):
            dispatch(Intent.RESTART)
            st.rerun()
    with col2:
        if st.button("Choose New Categories", width="stretch"):
            dispatch(Intent.RESET)
            st.rerun()


def _render_active_session() -> None:
    state = st.session_state.study_state

    if render_session_stats(progress(state), len(state.missed)):
        dispatch(Intent.RESET)
        st.rerun()

    card = current_card(state)
    if card is None:
        st.info("No card loaded.")
        return

    if not state.is_flipped:
        render_plant_front(card)
    else:
        render_plant_back(card)
        st.markdown("<br>", unsafe_allow_html=True)
        render_plant_details(card)

    st.markdown("<br>", unsafe_allow_html=True)
    col1, col2, col3 = st.columns(3)

    with col1:
        if st.button("Show Image" if state.is_flipped else "Flip", width="stretch"):
            dispatch(Intent.FLIP)
            st.rerun()

    with col2:
        if st.button("Missed", width="stretch"):
            dispatch(Intent.MARK_MISSED)
            st.rerun()

    with col3:
        if st.button("Next", type="primary", width="stretch"):
            dispatch(Intent.NEXT)
            st.rerun()

    if state.phase.kind == Phase.STUDYING and state.missed:
        st.caption("Missed cards will be reviewed after all selected categories finish.")
