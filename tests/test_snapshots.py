import uuid

import pytest

from draft.engine import DRAFT_SEQUENCE, current_phase, select_hero, start, undo
from draft.models import DraftSession
from draft.snapshots import delete_snapshot, load_snapshot, save_snapshot

pytestmark = pytest.mark.django_db


def test_load_missing_returns_none():
    assert load_snapshot(uuid.uuid4()) is None


def test_save_and_load(catalog, hero_ids):
    session_id = uuid.uuid4()
    state = start()
    for hero_id in hero_ids[:7]:
        select_hero(state, hero_id, catalog)

    session = save_snapshot(session_id, state, red_team="Onic", blue_team="RRQ")
    assert session.current_step == 7
    assert session.status == "IN_PROGRESS"
    assert session.red_team == "Onic"

    loaded = load_snapshot(session_id)
    assert loaded.history == state.history
    assert loaded.consumed_heroes == state.consumed_heroes
    assert current_phase(loaded) == DRAFT_SEQUENCE[7]


def test_last_write_wins(catalog, hero_ids):
    session_id = uuid.uuid4()
    state = start()
    select_hero(state, hero_ids[0], catalog)
    save_snapshot(session_id, state, red_team="Onic")

    undo(state)
    save_snapshot(session_id, state)

    session = DraftSession.objects.get(id=session_id)
    assert session.history == []
    assert session.current_step == 0
    assert session.red_team == "Onic"
    assert DraftSession.objects.count() == 1


def test_completed_status(catalog, hero_ids):
    session_id = uuid.uuid4()
    state = start()
    for hero_id in hero_ids[:20]:
        select_hero(state, hero_id, catalog)
    assert save_snapshot(session_id, state).status == "COMPLETED"


def test_corrupt_history_rejected():
    session = DraftSession.objects.create(history=[{"step": 0, "side": "blue"}])
    with pytest.raises(ValueError):
        load_snapshot(session.id)


def test_delete_snapshot():
    session_id = uuid.uuid4()
    save_snapshot(session_id, start())
    assert delete_snapshot(session_id) is True
    assert delete_snapshot(session_id) is False
