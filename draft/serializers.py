from rest_framework import serializers
from .models import Hero, DraftSession


class HeroSerializer(serializers.ModelSerializer):
    roles = serializers.ListField(child=serializers.CharField(), read_only=True)

    class Meta:
        model = Hero
        fields = ["id", "name", "role1", "role2", "roles", "icon", "is_available"]


class DraftCreateSerializer(serializers.ModelSerializer):
    class Meta:
        model = DraftSession
        fields = ["red_team", "blue_team"]


class SelectHeroSerializer(serializers.Serializer):
    hero_id = serializers.CharField(max_length=64)


class TeamSplitSerializer(serializers.Serializer):
    player_ids = serializers.ListField(child=serializers.IntegerField(), required=False, default=list)
