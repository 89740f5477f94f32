from .phases import (
    DRAFT_SEQUENCE,
    SLOTS_PER_SIDE,
    ActionKind,
    DraftPhase,
    Side,
    validate_sequence,
)
from .session import (
    DraftComplete,
    DraftError,
    DraftEvent,
    DraftState,
    HeroUnavailable,
    NothingToUndo,
    UnknownHero,
    available,
    counts,
    current_phase,
    is_complete,
    reset,
    restore,
    select_hero,
    start,
    undo,
)
