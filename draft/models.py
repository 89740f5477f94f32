import uuid
from django.db import models


ROLE_CHOICES = [
    ("tank", "Tank"),
    ("fighter", "Fighter"),
    ("assassin", "Assassin"),
    ("mage", "Mage"),
    ("marksman", "Marksman"),
    ("support", "Support"),
]


class Hero(models.Model):
    id = models.CharField(max_length=64, primary_key=True)
    name = models.CharField(max_length=128)
    role1 = models.CharField(max_length=16, choices=ROLE_CHOICES)
    role2 = models.CharField(max_length=16, choices=ROLE_CHOICES, null=True, blank=True)
    icon = models.URLField(null=True, blank=True)
    is_available = models.BooleanField(default=True)

    class Meta:
        ordering = ["name"]

    @property
    def roles(self):
        return [r for r in (self.role1, self.role2) if r]

    def __str__(self):
        return self.name


class DraftSession(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    red_team = models.CharField(max_length=128, null=True, blank=True)
    blue_team = models.CharField(max_length=128, null=True, blank=True)

    # Snapshot of the engine state: ordered DraftEvent dicts
    current_step = models.PositiveSmallIntegerField(default=0)
    history = models.JSONField(default=list)

    status = models.CharField(
        max_length=32,
        default="IN_PROGRESS",
        choices=[
            ("IN_PROGRESS", "In progress"),
            ("COMPLETED", "Completed"),
        ],
    )

    def __str__(self):
        return f"Draft {self.id}"


class TeamSplit(models.Model):
    """A random scrim split of the roster into two teams."""
    player_ids = models.JSONField(default=list)
    teams = models.JSONField(default=dict)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"Split {self.pk} ({len(self.player_ids)} players)"
