"""
Survival Plant Flashcards - Main App

Streamlit UI for studying survival plant cards by category.

Run with:
    streamlit run app/streamlit_app.py
"""

import logging
import sys
from pathlib import Path

# Streamlit puts app/ on sys.path, not the project root
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state, load_dataset
from core import config
from core.plant_repo import PlantDatasetError


# ---- Page Setup ----

st.set_page_config(
    page_title="Survival Plant Flashcards",
    page_icon="🌿",
    layout="centered"
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


# ---- Main App ----

def main():
    """Main app entry point."""
    try:
        load_dataset()
    except (FileNotFoundError, PlantDatasetError) as e:
        st.error(f"Could not load plant dataset: {e}")
        st.caption("Run `python -m scripts.data.import_plants` to build it from the CSV export.")
        st.stop()

    ensure_session_state()

    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
