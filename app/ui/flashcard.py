"""
Flashcard UI Component

Renders plant flashcards: image (or placeholder) on the front,
name and scientific name on the back.
"""

from __future__ import annotations

from html import escape

import streamlit as st
from app.ui.flashcard_style import (
    CARD_MIN_HEIGHT,
    CARD_PADDING,
    DEFAULT_FLASHCARD_STYLE,
    PLANT_BACK_STYLE,
    PLANT_PLACEHOLDER_STYLE,
    FlashcardStyle,
)
from core.schemas import PlantRecord


def render_flashcard(
    main_text: str,
    subtitle: str = "",
    corner_text: str = "",
    style: FlashcardStyle | None = None,
) -> None:
    """
    Render a flashcard box.

    Args:
        main_text: Primary text (center, large)
        subtitle: Optional secondary text (below main, smaller)
        corner_text: Optional text in top-right corner
        style: Optional style preset (default: DEFAULT_FLASHCARD_STYLE)
    """
    s = style or DEFAULT_FLASHCARD_STYLE

    corner_html = ""
    if corner_text:
        corner_html = (
            f'<div style="position: absolute; top: 15px; right: 20px; '
            f'font-size: {s.corner_font_size}; color: {s.corner_color}; '
            f'font-style: {s.corner_style};">{escape(corner_text)}</div>'
        )

    white_space = "normal" if s.wrap_text else "nowrap"
    main_html = (
        f'<h1 style="font-size: {s.main_font_size}; color: {s.main_color}; '
        f'font-weight: {s.main_weight}; margin: 0; white-space: {white_space}; '
        'text-align: center; line-height: 1.4; max-width: 100%; '
        'overflow-wrap: anywhere; word-break: break-word;">'
        f"{escape(main_text)}</h1>"
    )

    subtitle_html = ""
    if subtitle:
        subtitle_html = (
            f'<p style="font-size: {s.subtitle_font_size}; color: {s.subtitle_color}; '
            f'font-style: {s.subtitle_style}; margin: 12px 0 0 0; text-align: center; '
            'line-height: 1.4; max-width: 100%; overflow-wrap: anywhere; '
            f'word-break: break-word;">{escape(subtitle)}</p>'
        )

    html = (
        f'<div style="background-color: {s.bg_color}; padding: {CARD_PADDING}; '
        f'border: {s.border}; border-radius: 12px; text-align: center; '
        'box-shadow: 0 4px 6px rgba(0, 0, 0, 0.1); '
        f'min-height: {CARD_MIN_HEIGHT}; display: flex; '
        'flex-direction: column; align-items: center; justify-content: center; '
        f'position: relative;">{corner_html}{main_html}{subtitle_html}</div>'
    )

    st.markdown(html, unsafe_allow_html=True)


def render_plant_front(plant: PlantRecord) -> None:
    """Image only, or a placeholder when the plant has no image yet."""
    if plant.image_url:
        st.image(plant.image_url, width="stretch")
        return
    render_flashcard(
        main_text="No image yet for this card.",
        subtitle="Flip to reveal the plant name and details.",
        style=PLANT_PLACEHOLDER_STYLE,
    )


def render_plant_back(plant: PlantRecord) -> None:
    render_flashcard(
        main_text=plant.common_name,
        subtitle=plant.scientific_name,
        style=PLANT_BACK_STYLE,
    )
