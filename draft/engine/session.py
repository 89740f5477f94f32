# draft/engine/session.py
"""Pick/ban draft state machine.

A DraftState is owned by its caller (a view, a command, a test) and is
passed into every operation. Operations validate first and only then
mutate, so a raised DraftError always leaves the state untouched.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .phases import DRAFT_SEQUENCE, ActionKind, DraftPhase, Side, validate_sequence


class DraftError(Exception):
    code = "draft_error"
    message = "Draft action rejected"

    def __init__(self, message=None, hero_id=None):
        self.hero_id = hero_id
        super().__init__(message or self.message)


class DraftComplete(DraftError):
    code = "draft_complete"
    message = "The draft has already been completed"


class HeroUnavailable(DraftError):
    code = "hero_unavailable"
    message = "This hero has already been picked or banned"


class UnknownHero(DraftError):
    code = "unknown_hero"
    message = "Hero not found in the catalog"


class NothingToUndo(DraftError):
    code = "nothing_to_undo"
    message = "There is no draft action to undo"


@dataclass(frozen=True)
class DraftEvent:
    step: int
    side: Side
    action: ActionKind
    slot_index: int
    hero_id: str

    @property
    def phase(self) -> DraftPhase:
        return DraftPhase(self.side, self.action, self.slot_index)

    def to_dict(self) -> Dict:
        return {
            "step": self.step,
            "side": self.side.value,
            "action": self.action.value,
            "slot_index": self.slot_index,
            "hero_id": self.hero_id,
        }

    @classmethod
    def from_dict(cls, data) -> "DraftEvent":
        return cls(
            step=int(data["step"]),
            side=Side(data["side"]),
            action=ActionKind(data["action"]),
            slot_index=int(data["slot_index"]),
            hero_id=data["hero_id"],
        )


@dataclass
class DraftState:
    sequence: Tuple[DraftPhase, ...] = DRAFT_SEQUENCE
    history: List[DraftEvent] = field(default_factory=list)
    consumed_heroes: Set[str] = field(default_factory=set)

    @property
    def current_step(self) -> int:
        return len(self.history)


def start(sequence: Sequence[DraftPhase] = DRAFT_SEQUENCE) -> DraftState:
    sequence = tuple(sequence)
    validate_sequence(sequence)
    return DraftState(sequence=sequence)


def is_complete(state: DraftState) -> bool:
    return state.current_step >= len(state.sequence)


def current_phase(state: DraftState) -> Optional[DraftPhase]:
    """The phase waiting for a hero, or None once the draft is complete."""
    if is_complete(state):
        return None
    return state.sequence[state.current_step]


def select_hero(state: DraftState, hero_id, catalog) -> DraftEvent:
    """Record hero_id against the current phase.

    Checks run in a fixed order: completion, then availability, then the
    catalog lookup. ``catalog`` only needs a ``get_hero(hero_id)`` method
    returning None for unknown ids.
    """
    phase = current_phase(state)
    if phase is None:
        raise DraftComplete(hero_id=hero_id)
    if hero_id in state.consumed_heroes:
        raise HeroUnavailable(hero_id=hero_id)
    if catalog.get_hero(hero_id) is None:
        raise UnknownHero(hero_id=hero_id)

    event = DraftEvent(
        step=state.current_step,
        side=phase.side,
        action=phase.action,
        slot_index=phase.slot_index,
        hero_id=hero_id,
    )
    state.history.append(event)
    state.consumed_heroes.add(hero_id)
    return event


def undo(state: DraftState) -> DraftEvent:
    if not state.history:
        raise NothingToUndo()
    event = state.history.pop()
    state.consumed_heroes.discard(event.hero_id)
    return event


def reset(state: DraftState) -> None:
    state.history.clear()
    state.consumed_heroes.clear()


def counts(state: DraftState) -> Dict[Tuple[Side, ActionKind], int]:
    tally = Counter((e.side, e.action) for e in state.history)
    return {(side, action): tally[(side, action)] for side in Side for action in ActionKind}


def available(state: DraftState, heroes):
    return [h for h in heroes if h.id not in state.consumed_heroes]


def restore(sequence: Sequence[DraftPhase], events) -> DraftState:
    """Rebuild a state from stored events, rejecting anything the engine
    could not have produced itself."""
    state = start(sequence)
    for event in events:
        if not isinstance(event, DraftEvent):
            event = DraftEvent.from_dict(event)
        step = state.current_step
        if step >= len(state.sequence):
            raise ValueError(f"History is longer than the {len(state.sequence)}-step sequence")
        if event.step != step:
            raise ValueError(f"Expected step {step}, got {event.step}")
        if event.phase != state.sequence[step]:
            raise ValueError(f"Event at step {step} does not match its phase")
        if event.hero_id in state.consumed_heroes:
            raise ValueError(f"Hero {event.hero_id} appears twice in history")
        state.history.append(event)
        state.consumed_heroes.add(event.hero_id)
    return state
