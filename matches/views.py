import logging
from datetime import date

from django.db.models import Count, Q
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import Match, MatchPlayer, Player, PlayerHero, Team
from .serializers import (
    MatchPlayerSerializer,
    MatchSerializer,
    PlayerHeroSerializer,
    PlayerSerializer,
    TeamSerializer,
)

logger = logging.getLogger(__name__)


class PlayerListView(APIView):
    def get(self, request):
        players = Player.objects.select_related("team").prefetch_related("player_heroes__hero")
        return Response(PlayerSerializer(players, many=True).data)

    def post(self, request):
        if not request.data.get("name"):
            return Response({"error": "name is required"}, status=status.HTTP_400_BAD_REQUEST)

        serializer = PlayerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        player = serializer.save()
        logger.info("Created player %s (%s)", player.id, player.name)
        return Response(PlayerSerializer(player).data, status=status.HTTP_201_CREATED)


class PlayerDetailView(APIView):
    def get(self, request, player_id):
        player = get_object_or_404(Player, id=player_id)
        return Response(PlayerSerializer(player).data)

    def patch(self, request, player_id):
        player = get_object_or_404(Player, id=player_id)
        serializer = PlayerSerializer(player, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    def delete(self, request, player_id):
        _, per_model = Player.objects.filter(id=player_id).delete()
        return Response({"deleted": per_model.get("matches.Player", 0)})


class PlayerHeroListView(APIView):
    def post(self, request, player_id):
        player = get_object_or_404(Player, id=player_id)
        serializer = PlayerHeroSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        hero = serializer.validated_data.pop("hero")
        player_hero, created = PlayerHero.objects.update_or_create(
            player=player,
            hero=hero,
            defaults=serializer.validated_data,
        )
        return Response(
            PlayerHeroSerializer(player_hero).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class PlayerHeroDetailView(APIView):
    def delete(self, request, player_id, hero_id):
        deleted, _ = PlayerHero.objects.filter(player_id=player_id, hero_id=hero_id).delete()
        if not deleted:
            return Response({"error": "not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


class MatchListView(APIView):
    def get(self, request):
        matches = Match.objects.prefetch_related("match_players__player", "match_players__hero")
        return Response(MatchSerializer(matches, many=True).data)

    def post(self, request):
        serializer = MatchSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        match = serializer.save()
        logger.info("Recorded match %s vs %s", match.id, match.opponent)
        return Response(MatchSerializer(match).data, status=status.HTTP_201_CREATED)


class MatchDetailView(APIView):
    def get(self, request, match_id):
        match = get_object_or_404(Match, id=match_id)
        return Response(MatchSerializer(match).data)

    def patch(self, request, match_id):
        match = get_object_or_404(Match, id=match_id)
        serializer = MatchSerializer(match, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)

    def delete(self, request, match_id):
        _, per_model = Match.objects.filter(id=match_id).delete()
        return Response({"deleted": per_model.get("matches.Match", 0)})


class MatchPlayerListView(APIView):
    def post(self, request, match_id):
        match = get_object_or_404(Match, id=match_id)
        serializer = MatchPlayerSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        player = serializer.validated_data.pop("player")
        line, created = MatchPlayer.objects.update_or_create(
            match=match,
            player=player,
            defaults=serializer.validated_data,
        )
        return Response(
            MatchPlayerSerializer(line).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


class RecentMatchesView(APIView):
    def get(self, request):
        try:
            limit = max(int(request.query_params.get("limit", 5)), 1)
        except ValueError:
            return Response({"error": "limit must be an integer"}, status=status.HTTP_400_BAD_REQUEST)
        matches = Match.objects.exclude(date=None).order_by("-date", "-id")[:limit]
        return Response(MatchSerializer(matches, many=True).data)


class UpcomingMatchesView(APIView):
    def get(self, request):
        matches = Match.objects.filter(date__gte=date.today()).order_by("date", "id")
        return Response(MatchSerializer(matches, many=True).data)


class TeamListView(APIView):
    def get(self, request):
        return Response(TeamSerializer(Team.objects.order_by("name"), many=True).data)

    def post(self, request):
        serializer = TeamSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        team = serializer.save()
        return Response(TeamSerializer(team).data, status=status.HTTP_201_CREATED)


class TeamDetailView(APIView):
    def get(self, request, team_id):
        team = get_object_or_404(Team, id=team_id)
        return Response(TeamSerializer(team).data)

    def patch(self, request, team_id):
        team = get_object_or_404(Team, id=team_id)
        serializer = TeamSerializer(team, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data)


class TeamRosterView(APIView):
    def get(self, request, team_id):
        team = get_object_or_404(Team, id=team_id)
        players = team.players.order_by("created_at", "id").prefetch_related("player_heroes__hero")
        return Response(PlayerSerializer(players, many=True).data)


class TeamDashboardView(APIView):
    """
    Win/loss summary plus recent and upcoming fixtures for one team.
    """

    def get(self, request, team_id):
        team = get_object_or_404(Team, id=team_id)

        totals = Match.objects.filter(team=team).aggregate(
            total=Count("id"),
            wins=Count("id", filter=Q(result="win")),
            losses=Count("id", filter=Q(result="loss")),
            draws=Count("id", filter=Q(result="draw")),
        )
        decided = totals["wins"] + totals["losses"]

        recent = Match.objects.filter(team=team).exclude(date=None).order_by("-date", "-id")[:5]
        upcoming = Match.objects.filter(team=team, date__gte=date.today()).order_by("date", "id")[:3]

        return Response({
            "team": TeamSerializer(team).data,
            "total_matches": totals["total"],
            "wins": totals["wins"],
            "losses": totals["losses"],
            "draws": totals["draws"],
            "winrate": round(totals["wins"] / decided * 100, 1) if decided > 0 else 0,
            "recent_matches": MatchSerializer(recent, many=True).data,
            "upcoming_matches": MatchSerializer(upcoming, many=True).data,
        })
