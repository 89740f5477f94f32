import logging
import math
import random

from django.conf import settings
from django.utils.decorators import method_decorator
from django.views.decorators.cache import cache_page
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from matches.models import Player
from matches.serializers import PlayerSummarySerializer
from .catalog import HeroCatalog, filter_heroes
from .engine import DRAFT_SEQUENCE
from .models import TeamSplit
from .serializers import HeroSerializer, TeamSplitSerializer

logger = logging.getLogger(__name__)


class HeroListView(APIView):
    """
    Returns all draftable heroes, optionally narrowed by ?role= and ?search=.
    Cached server-side because this data is effectively static.
    """

    @method_decorator(cache_page(settings.HERO_LIST_CACHE_SECONDS))
    def get(self, request):
        heroes = filter_heroes(
            HeroCatalog().list_heroes(),
            role=request.query_params.get("role"),
            search=request.query_params.get("search"),
        )
        serializer = HeroSerializer(heroes, many=True)
        return Response(serializer.data)


class DraftSequenceView(APIView):
    def get(self, request):
        return Response([
            {"step": step, **phase.to_dict()}
            for step, phase in enumerate(DRAFT_SEQUENCE)
        ])


class TeamSplitView(APIView):
    """
    Scrim helper: shuffles the selected players (all players when none are
    given) and splits them into two teams. The first team takes the odd one.
    """

    def post(self, request):
        serializer = TeamSplitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        player_ids = serializer.validated_data["player_ids"]

        if player_ids:
            players = list(Player.objects.filter(id__in=player_ids))
        else:
            players = list(Player.objects.all())

        random.shuffle(players)
        half = math.ceil(len(players) / 2)
        teams = {
            "team_a": PlayerSummarySerializer(players[:half], many=True).data,
            "team_b": PlayerSummarySerializer(players[half:], many=True).data,
        }

        split = TeamSplit.objects.create(player_ids=[p.id for p in players], teams=teams)
        logger.info("Recorded team split %s with %d players", split.id, len(players))

        return Response({"id": split.id, **teams}, status=status.HTTP_201_CREATED)


class PingView(APIView):
    def get(self, request):
        return Response({"pong": True})
