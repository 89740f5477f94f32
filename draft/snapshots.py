# draft/snapshots.py
"""Persistence of in-memory draft states as DraftSession rows.

The engine state is authoritative while a request is handled; these rows
are last-write-wins bookkeeping between requests.
"""

import logging

from .engine import DRAFT_SEQUENCE, is_complete, restore
from .models import DraftSession

logger = logging.getLogger(__name__)


def save_snapshot(session_id, state, **labels):
    defaults = {
        "current_step": state.current_step,
        "history": [e.to_dict() for e in state.history],
        "status": "COMPLETED" if is_complete(state) else "IN_PROGRESS",
    }
    for field in ("red_team", "blue_team"):
        if field in labels:
            defaults[field] = labels[field]

    session, _ = DraftSession.objects.update_or_create(id=session_id, defaults=defaults)
    return session


def state_from_session(session, sequence=DRAFT_SEQUENCE):
    try:
        return restore(sequence, session.history or [])
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("Draft session %s has a corrupt history: %s", session.id, e)
        raise ValueError(f"Corrupt draft history for session {session.id}") from e


def load_snapshot(session_id, sequence=DRAFT_SEQUENCE):
    session = DraftSession.objects.filter(id=session_id).first()
    if session is None:
        return None
    return state_from_session(session, sequence)


def delete_snapshot(session_id):
    deleted, _ = DraftSession.objects.filter(id=session_id).delete()
    return deleted > 0
