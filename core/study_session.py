"""
Study session state machine.

Session state is an immutable SessionState value. Every user intent maps to a
pure transition function that takes the current state (plus the dataset when
decks have to be built) and returns the next state. Illegal or rejected
intents return the state unchanged.

Flow:
    Setup -> Studying -> MissedReview -> Complete
    Complete -> Studying   (restart with the same categories)
    any      -> Setup      (reset)

Categories are studied in the order they were selected. Selected categories
with no matching plants are skipped. Missed cards are reviewed once, after
the last category.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Sequence, Union

from core.categories import Category, category_label
from core.deck_builder import build_deck, count_cards, shuffle_cards
from core.schemas import PlantRecord

logger = logging.getLogger(__name__)


MISSED_REVIEW_LABEL = "Missed Review"


class Phase(str, Enum):
    """Coarse stage of a study session."""
    SETUP = "setup"
    STUDYING = "studying"
    MISSED_REVIEW = "missed_review"
    COMPLETE = "complete"


# ---- Phases ----

@dataclass(frozen=True)
class SetupPhase:
    @property
    def kind(self) -> Phase:
        return Phase.SETUP


@dataclass(frozen=True)
class StudyingPhase:
    """
    Studying one selected category.

    category_index points into SessionState.selected_categories.
    """
    category_index: int
    deck: tuple[PlantRecord, ...]
    card_index: int = 0

    @property
    def kind(self) -> Phase:
        return Phase.STUDYING


@dataclass(frozen=True)
class MissedReviewPhase:
    """Reviewing the cards missed during the category pass."""
    deck: tuple[PlantRecord, ...]
    card_index: int = 0

    @property
    def kind(self) -> Phase:
        return Phase.MISSED_REVIEW


@dataclass(frozen=True)
class CompletePhase:
    @property
    def kind(self) -> Phase:
        return Phase.COMPLETE


SessionPhase = Union[SetupPhase, StudyingPhase, MissedReviewPhase, CompletePhase]


# ---- Session State ----

@dataclass(frozen=True)
class SessionState:
    """
    Full state of one user's study session.
    """
    selected_categories: tuple[Category, ...] = ()
    shuffle_enabled: bool = False
    phase: SessionPhase = field(default_factory=SetupPhase)
    missed: tuple[PlantRecord, ...] = ()
    is_flipped: bool = False
    reviewed_count: int = 0


@dataclass(frozen=True)
class DeckProgress:
    """Position within the active deck, for display."""
    mode_label: str
    card_number: int  # 1-based
    deck_size: int


@dataclass(frozen=True)
class SessionSummary:
    """Numbers shown when a session completes."""
    categories: tuple[str, ...]
    total_available: int
    reviewed_count: int
    missed_count: int
    missed_names: tuple[str, ...]


def initial_state(
    categories: Sequence[Category] = (),
    shuffle: bool = False
) -> SessionState:
    """
    Build a Setup state with the given category selection.
    """
    selected: list[Category] = []
    for category in categories:
        category = Category(category)
        if category not in selected:
            selected.append(category)
    return SessionState(selected_categories=tuple(selected), shuffle_enabled=shuffle)


# ---- Queries ----

def current_card(state: SessionState) -> Optional[PlantRecord]:
    """Return the card on screen, or None outside Studying/MissedReview."""
    phase = state.phase
    if isinstance(phase, (StudyingPhase, MissedReviewPhase)):
        if 0 <= phase.card_index < len(phase.deck):
            return phase.deck[phase.card_index]
    return None


def active_category(state: SessionState) -> Optional[Category]:
    phase = state.phase
    if isinstance(phase, StudyingPhase):
        return state.selected_categories[phase.category_index]
    return None


def total_available(state: SessionState, plants: Sequence[PlantRecord]) -> int:
    """Cards available across all selected categories."""
    return count_cards(plants, state.selected_categories)


def can_start(state: SessionState, plants: Sequence[PlantRecord]) -> bool:
    """
    True if start_session would begin a session.
    """
    if state.phase.kind not in (Phase.SETUP, Phase.COMPLETE):
        return False
    if not state.selected_categories:
        return False
    return total_available(state, plants) > 0


def progress(state: SessionState) -> Optional[DeckProgress]:
    phase = state.phase
    if isinstance(phase, StudyingPhase):
        label = category_label(state.selected_categories[phase.category_index])
    elif isinstance(phase, MissedReviewPhase):
        label = MISSED_REVIEW_LABEL
    else:
        return None
    return DeckProgress(
        mode_label=label,
        card_number=phase.card_index + 1,
        deck_size=len(phase.deck),
    )


def session_summary(state: SessionState, plants: Sequence[PlantRecord]) -> SessionSummary:
    return SessionSummary(
        categories=tuple(category_label(c) for c in state.selected_categories),
        total_available=total_available(state, plants),
        reviewed_count=state.reviewed_count,
        missed_count=len(state.missed),
        missed_names=tuple(plant.common_name for plant in state.missed),
    )


# ---- Transitions ----

def toggle_category(state: SessionState, category: Category) -> SessionState:
    """
    Add or remove a category from the selection (Setup only).

    A category toggled on goes to the end of the study order.
    """
    if state.phase.kind != Phase.SETUP:
        logger.debug("Ignoring category toggle outside setup (phase=%s)", state.phase.kind.value)
        return state

    category = Category(category)
    if category in state.selected_categories:
        selected = tuple(c for c in state.selected_categories if c != category)
    else:
        selected = state.selected_categories + (category,)
    return replace(state, selected_categories=selected)


def set_shuffle(state: SessionState, enabled: bool) -> SessionState:
    """Enable or disable shuffling (Setup only)."""
    if state.phase.kind != Phase.SETUP:
        logger.debug("Ignoring shuffle change outside setup (phase=%s)", state.phase.kind.value)
        return state
    return replace(state, shuffle_enabled=bool(enabled))


def _enter_next_deck(
    state: SessionState,
    plants: Sequence[PlantRecord],
    start_index: int,
    rng: Optional[random.Random]
) -> SessionState:
    """
    Move to the first non-empty category at or after start_index.

    Falls through to missed review, then to completion.
    """
    categories = state.selected_categories
    for index in range(start_index, len(categories)):
        deck = build_deck(plants, categories[index], state.shuffle_enabled, rng)
        if deck:
            return replace(
                state,
                phase=StudyingPhase(category_index=index, deck=tuple(deck)),
                is_flipped=False,
            )
        logger.debug("Skipping empty category %s", categories[index].value)

    if state.missed:
        deck = shuffle_cards(state.missed, rng) if state.shuffle_enabled else list(state.missed)
        logger.info("Starting missed review with %d cards", len(deck))
        return replace(state, phase=MissedReviewPhase(deck=tuple(deck)), is_flipped=False)

    return _complete(state)


def _complete(state: SessionState) -> SessionState:
    logger.info(
        "Session complete: reviewed=%d missed=%d",
        state.reviewed_count,
        len(state.missed),
    )
    return replace(state, phase=CompletePhase(), is_flipped=False)


def start_session(
    state: SessionState,
    plants: Sequence[PlantRecord],
    rng: Optional[random.Random] = None
) -> SessionState:
    """
    Start (or restart) a session with the current selection.

    Only legal from Setup or Complete. Returns the state unchanged if the
    selection yields no cards.
    """
    if not can_start(state, plants):
        logger.debug(
            "Start rejected (phase=%s, categories=%d)",
            state.phase.kind.value,
            len(state.selected_categories),
        )
        return state

    fresh = replace(
        state,
        phase=SetupPhase(),
        missed=(),
        is_flipped=False,
        reviewed_count=0,
    )
    logger.info(
        "Starting session: categories=%s shuffle=%s",
        ",".join(c.value for c in fresh.selected_categories),
        fresh.shuffle_enabled,
    )
    return _enter_next_deck(fresh, plants, 0, rng)


restart_session = start_session


def flip_card(state: SessionState) -> SessionState:
    """Toggle between card front and back."""
    if current_card(state) is None:
        return state
    return replace(state, is_flipped=not state.is_flipped)


def next_card(
    state: SessionState,
    plants: Sequence[PlantRecord],
    rng: Optional[random.Random] = None
) -> SessionState:
    """
    Advance to the next card, category, missed review, or completion.

    No-op in Setup and Complete.
    """
    phase = state.phase
    if not isinstance(phase, (StudyingPhase, MissedReviewPhase)):
        return state

    reviewed = state.reviewed_count + (1 if current_card(state) is not None else 0)
    state = replace(state, is_flipped=False, reviewed_count=reviewed)

    if phase.card_index + 1 < len(phase.deck):
        return replace(state, phase=replace(phase, card_index=phase.card_index + 1))

    if isinstance(phase, MissedReviewPhase):
        return _complete(state)

    return _enter_next_deck(state, plants, phase.category_index + 1, rng)


def mark_missed(
    state: SessionState,
    plants: Sequence[PlantRecord],
    rng: Optional[random.Random] = None
) -> SessionState:
    """
    Queue the current card for missed review, then advance.

    Cards are deduplicated by common_name.
    """
    card = current_card(state)
    if card is None:
        return state

    if not any(m.common_name == card.common_name for m in state.missed):
        state = replace(state, missed=state.missed + (card,))
    return next_card(state, plants, rng)


def reset_session(state: SessionState, clear_selection: bool = False) -> SessionState:
    """
    Return to Setup, discarding missed cards and position.

    The category selection and shuffle setting are kept unless
    clear_selection is True.
    """
    return SessionState(
        selected_categories=() if clear_selection else state.selected_categories,
        shuffle_enabled=state.shuffle_enabled,
    )


# ---- Intent Dispatch ----

class Intent(str, Enum):
    """User intents forwarded from the UI."""
    TOGGLE_CATEGORY = "toggle_category"
    SET_SHUFFLE = "set_shuffle"
    START = "start"
    RESTART = "restart"
    FLIP = "flip"
    MARK_MISSED = "mark_missed"
    NEXT = "next"
    RESET = "reset"


def apply_intent(
    state: SessionState,
    intent: Intent,
    plants: Sequence[PlantRecord],
    rng: Optional[random.Random] = None,
    category: Optional[Category] = None,
    enabled: Optional[bool] = None,
    clear_selection: bool = False
) -> SessionState:
    """
    Apply one user intent and return the next state.
    """
    intent = Intent(intent)
    if intent == Intent.TOGGLE_CATEGORY:
        if category is None:
            raise ValueError("toggle_category requires a category")
        return toggle_category(state, category)
    if intent == Intent.SET_SHUFFLE:
        if enabled is None:
            raise ValueError("set_shuffle requires enabled")
        return set_shuffle(state, enabled)
    if intent in (Intent.START, Intent.RESTART):
        return start_session(state, plants, rng)
    if intent == Intent.FLIP:
        return flip_card(state)
    if intent == Intent.MARK_MISSED:
        return mark_missed(state, plants, rng)
    if intent == Intent.NEXT:
        return next_card(state, plants, rng)
    if intent == Intent.RESET:
        return reset_session(state, clear_selection=clear_selection)
    raise ValueError(f"Unknown intent: {intent}")
