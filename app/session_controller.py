"""
Session lifecycle helpers for Streamlit app.

The only place that writes st.session_state.study_state.
"""

from __future__ import annotations

import logging

import streamlit as st

from app.state import load_dataset
from core.study_session import Intent, SessionState, apply_intent

logger = logging.getLogger(__name__)


def dispatch(intent: Intent, **kwargs) -> SessionState:
    """
    Apply a user intent to the stored session state.

    Args:
        intent: What the user did
        **kwargs: Intent arguments (category, enabled, clear_selection)

    Returns:
        The new session state
    """
    before: SessionState = st.session_state.study_state
    after = apply_intent(before, intent, load_dataset(), **kwargs)
    if after is before:
        logger.debug("Intent %s left state unchanged", Intent(intent).value)
    st.session_state.study_state = after
    return after
