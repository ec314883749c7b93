"""
Plant listing page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.state import load_dataset
from core.categories import CATEGORY_LABELS, Category, matches_category
from core.plant_repo import plants_to_dataframe


def render_plants_page() -> None:
    st.title("Survival Plant Flashcards")
    st.markdown("North American plants for survival, bushcraft, and friction fire.")

    plants = load_dataset()
    labels = {CATEGORY_LABELS[c]: c for c in Category}
    chosen = st.multiselect("Show plants in any of", list(labels.keys()))
    categories = [labels[label] for label in chosen]

    if categories:
        plants = [p for p in plants if any(matches_category(p, c) for c in categories)]

    st.caption(f"{len(plants)} plants")
    st.dataframe(plants_to_dataframe(plants), hide_index=True)
