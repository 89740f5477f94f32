# draft/engine/phases.py

from dataclasses import dataclass
from enum import Enum


class Side(str, Enum):
    RED = "red"
    BLUE = "blue"

    @property
    def label(self):
        return self.value.title()


class ActionKind(str, Enum):
    BAN = "ban"
    PICK = "pick"


@dataclass(frozen=True)
class DraftPhase:
    side: Side
    action: ActionKind
    slot_index: int

    @property
    def label(self):
        return f"{self.side.label} Team - {self.action.value.title()} {self.slot_index + 1}"

    def to_dict(self):
        return {
            "side": self.side.value,
            "action": self.action.value,
            "slot_index": self.slot_index,
            "label": self.label,
        }


RED, BLUE = Side.RED, Side.BLUE
BAN, PICK = ActionKind.BAN, ActionKind.PICK

# Tournament format: 3 bans each, picks 1-2-2-1, 2 more bans each, picks 1-2-1.
DRAFT_SEQUENCE = (
    DraftPhase(RED, BAN, 0), DraftPhase(BLUE, BAN, 0),
    DraftPhase(RED, BAN, 1), DraftPhase(BLUE, BAN, 1),
    DraftPhase(RED, BAN, 2), DraftPhase(BLUE, BAN, 2),

    DraftPhase(RED, PICK, 0),
    DraftPhase(BLUE, PICK, 0), DraftPhase(BLUE, PICK, 1),
    DraftPhase(RED, PICK, 1), DraftPhase(RED, PICK, 2),
    DraftPhase(BLUE, PICK, 2),

    DraftPhase(BLUE, BAN, 3), DraftPhase(RED, BAN, 3),
    DraftPhase(BLUE, BAN, 4), DraftPhase(RED, BAN, 4),

    DraftPhase(BLUE, PICK, 3),
    DraftPhase(RED, PICK, 3), DraftPhase(RED, PICK, 4),
    DraftPhase(BLUE, PICK, 4),
)

SLOTS_PER_SIDE = 5


def validate_sequence(sequence):
    """Raise ValueError unless the sequence can drive a draft.

    Slot indexes must be unique per (side, action) so every phase maps to
    exactly one board slot.
    """
    if not sequence:
        raise ValueError("Draft sequence must not be empty")

    seen = set()
    for step, phase in enumerate(sequence):
        key = (phase.side, phase.action, phase.slot_index)
        if phase.slot_index < 0:
            raise ValueError(f"Negative slot index at step {step}")
        if key in seen:
            raise ValueError(
                f"Duplicate slot {phase.slot_index} for {phase.side.value} {phase.action.value} at step {step}"
            )
        seen.add(key)
