"""
Flashcard style presets and constants.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---- Shared Card Layout ----

CARD_PADDING = "35px 24px"
CARD_MIN_HEIGHT = "210px"
FRONT_BG_COLOR = "#f0f2f6"
BACK_BG_COLOR = "#eef6ea"
PLACEHOLDER_BORDER = "1px dashed #bbb"


# ---- Shared Typography Defaults ----

DEFAULT_MAIN_FONT_SIZE = "2.6em"
DEFAULT_MAIN_COLOR = "#1f1f1f"
DEFAULT_MAIN_WEIGHT = "normal"
DEFAULT_SUBTITLE_FONT_SIZE = "1.2em"
DEFAULT_SUBTITLE_COLOR = "#666"
DEFAULT_SUBTITLE_STYLE = "italic"
DEFAULT_CORNER_FONT_SIZE = "0.9em"
DEFAULT_CORNER_COLOR = "#666"
DEFAULT_CORNER_STYLE = "italic"


@dataclass(frozen=True)
class FlashcardStyle:
    """
    Visual style preset for flashcards.
    """
    main_font_size: str = DEFAULT_MAIN_FONT_SIZE
    main_color: str = DEFAULT_MAIN_COLOR
    main_weight: str = DEFAULT_MAIN_WEIGHT
    subtitle_font_size: str = DEFAULT_SUBTITLE_FONT_SIZE
    subtitle_color: str = DEFAULT_SUBTITLE_COLOR
    subtitle_style: str = DEFAULT_SUBTITLE_STYLE
    corner_font_size: str = DEFAULT_CORNER_FONT_SIZE
    corner_color: str = DEFAULT_CORNER_COLOR
    corner_style: str = DEFAULT_CORNER_STYLE
    wrap_text: bool = True
    bg_color: str = FRONT_BG_COLOR
    border: str = "none"


DEFAULT_FLASHCARD_STYLE = FlashcardStyle()


# ---- Plant Card Presets ----

# Front without an image: placeholder text in a dashed box
PLANT_PLACEHOLDER_STYLE = FlashcardStyle(
    main_font_size="1.2em",
    main_color="#555",
    subtitle_font_size="0.8em",
    subtitle_style="normal",
    bg_color="#fafafa",
    border=PLACEHOLDER_BORDER,
)

PLANT_BACK_STYLE = FlashcardStyle(
    main_font_size="2.2em",
    main_weight="600",
    subtitle_font_size="1.1em",
    bg_color=BACK_BG_COLOR,
)
