"""UI Components for Survival Plant Flashcards"""

from app.ui.flashcard import render_flashcard, render_plant_front, render_plant_back
from app.ui.session_stats import render_session_stats, render_session_complete
from app.ui.details import render_plant_details
from app.ui.study_settings import render_study_settings

__all__ = [
    "render_flashcard",
    "render_plant_front",
    "render_plant_back",
    "render_session_stats",
    "render_session_complete",
    "render_plant_details",
    "render_study_settings",
]
