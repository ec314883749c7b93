"""
Plant Details UI

Renders the detail lines shown on the back of a plant card.
"""

import streamlit as st

from core.schemas import PlantRecord


PLACEHOLDER = "—"


def _join_or_placeholder(items: list[str]) -> str:
    return ", ".join(items) if items else PLACEHOLDER


def friction_fire_roles(plant: PlantRecord) -> str:
    """'Spindle, Hearth', one of them, or the placeholder."""
    roles = []
    if plant.friction_fire.spindle:
        roles.append("Spindle")
    if plant.friction_fire.hearth:
        roles.append("Hearth")
    return _join_or_placeholder(roles)


def plant_detail_lines(plant: PlantRecord) -> list[tuple[str, str]]:
    """
    Label/value pairs for the card back, with placeholders for empty fields.
    """
    return [
        ("Uses", _join_or_placeholder(plant.uses)),
        ("Edible Parts", _join_or_placeholder(plant.edibility.edible_parts)),
        ("Medicinal Uses", _join_or_placeholder(plant.medicinal.uses)),
        ("Cautions", plant.edibility.cautions or PLACEHOLDER),
        ("Friction Fire", friction_fire_roles(plant)),
    ]


def render_plant_details(plant: PlantRecord):
    """
    Render detail lines, plus an expander with notes when any exist.

    Args:
        plant: Plant on the current card
    """
    for label, value in plant_detail_lines(plant):
        st.markdown(f"**{label}:** {value}")

    notes = [
        ("Friction fire", plant.friction_fire.notes),
        ("Tinder", plant.tinder.notes),
        ("Cordage material", plant.cordage.material),
        ("Wood", plant.wood.notes),
        ("Edible preparation", plant.edibility.preparation),
        ("Medicinal preparation", plant.medicinal.preparation),
        ("Medicinal cautions", plant.medicinal.cautions),
    ]
    notes = [(label, text) for label, text in notes if text]
    if notes:
        with st.expander("📖 Notes"):
            for label, text in notes:
                st.caption(f"**{label}:** {text}")
