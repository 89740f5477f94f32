# draft/views.py
import logging
import uuid

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import APIView

from .catalog import HeroCatalog
from .engine import (
    SLOTS_PER_SIDE,
    ActionKind,
    DraftComplete,
    DraftError,
    HeroUnavailable,
    NothingToUndo,
    Side,
    UnknownHero,
    counts,
    current_phase,
    is_complete,
    reset,
    select_hero,
    start,
    undo,
)
from .models import DraftSession as Draft, Hero
from .serializers import DraftCreateSerializer, SelectHeroSerializer
from .snapshots import delete_snapshot, save_snapshot, state_from_session

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    DraftComplete: status.HTTP_409_CONFLICT,
    HeroUnavailable: status.HTTP_409_CONFLICT,
    UnknownHero: status.HTTP_400_BAD_REQUEST,
    NothingToUndo: status.HTTP_409_CONFLICT,
}


def draft_error_response(error):
    code = ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST)
    return Response({"error": error.code, "detail": str(error)}, status=code)


class CorruptSession(APIException):
    status_code = status.HTTP_409_CONFLICT
    default_code = "corrupt_session"


def load_state(draft):
    try:
        return state_from_session(draft)
    except ValueError as e:
        raise CorruptSession({"error": "corrupt_session", "detail": str(e)}) from e


class DraftListView(APIView):
    def get(self, request):
        drafts = Draft.objects.order_by("-created_at")
        return Response([
            {
                "id": str(d.id),
                "red_team": d.red_team,
                "blue_team": d.blue_team,
                "status": d.status,
                "current_step": d.current_step,
                "created_at": d.created_at,
                "updated_at": d.updated_at,
            }
            for d in drafts
        ])

    def post(self, request):
        serializer = DraftCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        state = start()
        draft = save_snapshot(uuid.uuid4(), state, **serializer.validated_data)
        logger.info("Created draft session %s", draft.id)

        return Response(serialize_draft(draft, state), status=status.HTTP_201_CREATED)


class DraftDetailView(APIView):
    def get(self, request, draft_id):
        draft = get_object_or_404(Draft, id=draft_id)
        return Response(serialize_draft(draft, load_state(draft)))

    def delete(self, request, draft_id):
        get_object_or_404(Draft, id=draft_id)
        delete_snapshot(draft_id)
        logger.info("Discarded draft session %s", draft_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class DraftSelectView(APIView):
    def post(self, request, draft_id):
        draft = get_object_or_404(Draft, id=draft_id)
        serializer = SelectHeroSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        hero_id = serializer.validated_data["hero_id"]

        state = load_state(draft)
        try:
            event = select_hero(state, hero_id, HeroCatalog())
        except DraftError as e:
            logger.info("Draft %s rejected hero %s: %s", draft_id, hero_id, e.code)
            return draft_error_response(e)

        draft = save_snapshot(draft.id, state)
        return Response({"event": event.to_dict(), "draft": serialize_draft(draft, state)})


class DraftUndoView(APIView):
    def post(self, request, draft_id):
        draft = get_object_or_404(Draft, id=draft_id)
        state = load_state(draft)
        try:
            event = undo(state)
        except DraftError as e:
            return draft_error_response(e)

        draft = save_snapshot(draft.id, state)
        return Response({"event": event.to_dict(), "draft": serialize_draft(draft, state)})


class DraftResetView(APIView):
    def post(self, request, draft_id):
        draft = get_object_or_404(Draft, id=draft_id)
        state = load_state(draft)
        reset(state)
        draft = save_snapshot(draft.id, state)
        logger.info("Reset draft session %s", draft_id)
        return Response(serialize_draft(draft, state))


def serialize_draft(draft, state):
    heroes = Hero.objects.in_bulk([e.hero_id for e in state.history])

    board = {
        side.value: {
            "bans": [None] * SLOTS_PER_SIDE,
            "picks": [None] * SLOTS_PER_SIDE,
        }
        for side in Side
    }
    for event in state.history:
        hero = heroes.get(event.hero_id)
        slots = board[event.side.value]["bans" if event.action == ActionKind.BAN else "picks"]
        if event.slot_index < len(slots):
            slots[event.slot_index] = {
                "id": event.hero_id,
                "name": hero.name if hero else event.hero_id,
                "icon": hero.icon if hero else None,
            }

    tally = {side.value: {action.value: 0 for action in ActionKind} for side in Side}
    for (side, action), n in counts(state).items():
        tally[side.value][action.value] = n

    phase = current_phase(state)

    return {
        "id": str(draft.id),
        "red_team": draft.red_team,
        "blue_team": draft.blue_team,
        "status": draft.status,
        "current_step": state.current_step,
        "total_steps": len(state.sequence),
        "current_phase": phase.to_dict() if phase else None,
        "is_complete": is_complete(state),
        "history": [e.to_dict() for e in state.history],
        "board": board,
        "counts": tally,
        "updated_at": draft.updated_at,
    }
