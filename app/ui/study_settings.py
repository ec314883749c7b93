"""
Study settings UI: category checkboxes, shuffle toggle, start button.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import dispatch
from core.categories import CATEGORY_LABELS, Category
from core.schemas import PlantRecord
from core.study_session import Intent, Phase, SessionState, can_start, total_available


def render_study_settings(state: SessionState, plants: list[PlantRecord]) -> None:
    """
    Render the settings box.

    Widgets are disabled while a session is running.
    """
    in_session = state.phase.kind in (Phase.STUDYING, Phase.MISSED_REVIEW)

    with st.container(border=True):
        st.subheader("Study Settings")

        columns = st.columns(3)
        for position, category in enumerate(Category):
            selected = category in state.selected_categories
            with columns[position % 3]:
                checked = st.checkbox(
                    CATEGORY_LABELS[category],
                    value=selected,
                    key=f"category_{category.value}",
                    disabled=in_session,
                )
            if checked != selected:
                dispatch(Intent.TOGGLE_CATEGORY, category=category)
                st.rerun()

        shuffle_on = st.checkbox(
            "Shuffle cards",
            value=state.shuffle_enabled,
            key="shuffle_cards",
            disabled=in_session,
        )
        if shuffle_on != state.shuffle_enabled:
            dispatch(Intent.SET_SHUFFLE, enabled=shuffle_on)
            st.rerun()

        if in_session:
            return

        total = total_available(state, plants)
        col1, col2 = st.columns([1, 2])
        with col1:
            if st.button("Start Session", type="primary", disabled=not can_start(state, plants), width="stretch"):
                dispatch(Intent.START)
                st.rerun()
        with col2:
            st.markdown(f"Total cards available: **{total}**")

        if not state.selected_categories:
            st.info("Select at least one category to study.")
        elif total == 0:
            st.info("No cards match the selected categories.")
