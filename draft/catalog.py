# draft/catalog.py
"""Hero catalog lookups used by the draft engine and the hero list endpoint."""

from .models import Hero


class HeroCatalog:
    """Database-backed catalog. Heroes flagged unavailable are invisible."""

    def queryset(self):
        return Hero.objects.filter(is_available=True).order_by("name")

    def list_heroes(self):
        return list(self.queryset())

    def get_hero(self, hero_id):
        return self.queryset().filter(pk=hero_id).first()


class StaticHeroCatalog:
    """In-memory catalog over any objects exposing ``id`` and ``name``."""

    def __init__(self, heroes):
        self.heroes = sorted(heroes, key=lambda h: h.name)
        self._by_id = {h.id: h for h in self.heroes}

    def list_heroes(self):
        return list(self.heroes)

    def get_hero(self, hero_id):
        return self._by_id.get(hero_id)


def filter_heroes(heroes, role=None, search=None):
    """Filter by role (either slot, case-insensitive) and name substring."""
    filtered = list(heroes)

    if role and role.lower() != "all":
        role_lower = role.lower()
        filtered = [
            h for h in filtered
            if any((r or "").lower() == role_lower for r in (h.role1, h.role2))
        ]

    if search:
        term = search.lower()
        filtered = [h for h in filtered if term in h.name.lower()]

    return filtered
