"""
Streamlit session state and dataset initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core import config, plant_repo
from core.categories import parse_categories
from core.schemas import PlantRecord
from core.study_session import initial_state


@st.cache_resource
def load_dataset() -> list[PlantRecord]:
    """
    Load the plant dataset (cached for the server process).
    """
    return plant_repo.get_all_plants()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "study_state" not in st.session_state:
        st.session_state.study_state = initial_state(
            categories=parse_categories(config.DEFAULT_CATEGORIES),
            shuffle=config.SHUFFLE_DEFAULT,
        )
