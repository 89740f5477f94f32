from rest_framework import serializers

from draft.models import Hero
from draft.serializers import HeroSerializer
from .models import Team, Player, PlayerHero, Match, MatchPlayer


class TeamSerializer(serializers.ModelSerializer):
    class Meta:
        model = Team
        fields = '__all__'


class PlayerHeroSerializer(serializers.ModelSerializer):
    hero = HeroSerializer(read_only=True)
    hero_id = serializers.PrimaryKeyRelatedField(queryset=Hero.objects.all(), source="hero", write_only=True)
    winrate = serializers.FloatField(read_only=True)

    class Meta:
        model = PlayerHero
        fields = ["id", "hero", "hero_id", "games_played", "wins", "losses", "winrate", "average_kda"]


class PlayerSerializer(serializers.ModelSerializer):
    player_heroes = PlayerHeroSerializer(many=True, read_only=True)

    class Meta:
        model = Player
        fields = ["id", "name", "team", "role", "mmr", "notes", "created_at", "player_heroes"]


class PlayerSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = Player
        fields = ["id", "name", "role", "mmr"]


class MatchPlayerSerializer(serializers.ModelSerializer):
    player = PlayerSummarySerializer(read_only=True)
    player_id = serializers.PrimaryKeyRelatedField(queryset=Player.objects.all(), source="player", write_only=True)
    hero = HeroSerializer(read_only=True)
    hero_id = serializers.PrimaryKeyRelatedField(
        queryset=Hero.objects.all(), source="hero", write_only=True, required=False, allow_null=True
    )
    kda = serializers.FloatField(read_only=True)

    class Meta:
        model = MatchPlayer
        fields = [
            "id", "player", "player_id", "hero", "hero_id", "role",
            "kills", "deaths", "assists", "kda", "damage_dealt", "gold_earned", "is_mvp",
        ]


class MatchSerializer(serializers.ModelSerializer):
    match_players = MatchPlayerSerializer(many=True, read_only=True)

    class Meta:
        model = Match
        fields = '__all__'
