from django.db import models

from draft.models import Hero


class Team(models.Model):
    name = models.CharField(max_length=255)
    acronym = models.CharField(max_length=16, null=True, blank=True)
    logo_url = models.URLField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return self.name


class Player(models.Model):
    name = models.CharField(max_length=255)
    team = models.ForeignKey(Team, on_delete=models.SET_NULL, null=True, blank=True, related_name="players")
    role = models.CharField(max_length=128, null=True, blank=True)
    mmr = models.IntegerField(null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return self.name


class PlayerHero(models.Model):
    player = models.ForeignKey(Player, on_delete=models.CASCADE, related_name="player_heroes")
    hero = models.ForeignKey(Hero, on_delete=models.PROTECT)

    games_played = models.PositiveIntegerField(default=0)
    wins = models.PositiveIntegerField(default=0)
    losses = models.PositiveIntegerField(default=0)
    average_kda = models.FloatField(default=0)

    class Meta:
        unique_together = ("player", "hero")

    @property
    def winrate(self):
        return round(self.wins / self.games_played * 100, 1) if self.games_played > 0 else 0


class Match(models.Model):
    RESULTS = [
        ("win", "Win"),
        ("loss", "Loss"),
        ("draw", "Draw"),
    ]

    team = models.ForeignKey(Team, on_delete=models.SET_NULL, null=True, blank=True, related_name="matches")
    date = models.DateField(null=True, blank=True)
    opponent = models.CharField(max_length=255, null=True, blank=True)
    result = models.CharField(max_length=8, choices=RESULTS, null=True, blank=True)
    notes = models.TextField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["team", "date"]),
        ]

    def __str__(self):
        return f"vs {self.opponent or 'TBD'} ({self.date})"


class MatchPlayer(models.Model):
    """One player's line in a recorded match."""
    LANES = [
        ("gold_lane", "Gold Lane"),
        ("mid_lane", "Mid Lane"),
        ("exp_lane", "EXP Lane"),
        ("jungle", "Jungle"),
        ("roam", "Roam"),
    ]

    match = models.ForeignKey(Match, on_delete=models.CASCADE, related_name="match_players")
    player = models.ForeignKey(Player, on_delete=models.CASCADE, related_name="match_lines")
    hero = models.ForeignKey(Hero, on_delete=models.PROTECT, null=True, blank=True)
    role = models.CharField(max_length=16, choices=LANES, null=True, blank=True)

    kills = models.PositiveSmallIntegerField(default=0)
    deaths = models.PositiveSmallIntegerField(default=0)
    assists = models.PositiveSmallIntegerField(default=0)
    damage_dealt = models.FloatField(default=0)
    gold_earned = models.FloatField(default=0)
    is_mvp = models.BooleanField(default=False)

    class Meta:
        unique_together = ("match", "player")
        ordering = ["-is_mvp", "id"]

    @property
    def kda(self):
        # Deathless games count as (kills + assists)
        if self.deaths == 0:
            return float(self.kills + self.assists)
        return round((self.kills + self.assists) / self.deaths, 2)
