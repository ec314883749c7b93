"""
Session Statistics UI

Renders progress metrics and the session summary.
"""

import streamlit as st

from core.study_session import DeckProgress, SessionSummary


def render_session_stats(progress: DeckProgress | None, missed_count: int) -> bool:
    """
    Render deck progress metrics and reset button.

    Returns:
        True if the reset button was clicked, False otherwise
    """
    if progress is None:
        return False

    col1, col2, col3, col4 = st.columns([3, 2, 2, 1])

    with col1:
        st.metric("Mode", progress.mode_label)

    with col2:
        st.metric("Card", f"{progress.card_number} of {progress.deck_size}")

    with col3:
        st.metric("Missed so far", missed_count)

    with col4:
        st.markdown("<br>", unsafe_allow_html=True)  # Align with metrics
        if st.button("❌", help="Reset / change categories", width="stretch"):
            return True

    st.divider()
    return False


def render_session_complete(summary: SessionSummary):
    """Render session completion summary."""
    st.success(f"🎉 Session complete! You went through {summary.reviewed_count} cards.")
    st.markdown(f"**Categories Studied:** {', '.join(summary.categories)}")
    st.markdown(f"**Total Cards Available:** {summary.total_available}")
    st.markdown(f"**Missed Cards:** {summary.missed_count}")
    if summary.missed_names:
        st.caption("Missed: " + ", ".join(summary.missed_names))
