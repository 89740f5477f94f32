import pytest

from draft.catalog import HeroCatalog, StaticHeroCatalog, filter_heroes
from draft.engine import UnknownHero, select_hero, start
from draft.models import Hero


def names(heroes):
    return [h.name for h in heroes]


class TestFilterHeroes:
    def test_role_matches_either_slot(self, heroes):
        assert names(filter_heroes(heroes, role="support")) == ["Angela", "Estes", "Johnson", "Mathilda"]

    def test_role_is_case_insensitive(self, heroes):
        assert filter_heroes(heroes, role="MaRkSmAn") == filter_heroes(heroes, role="marksman")

    @pytest.mark.parametrize("role", [None, "", "all", "ALL"])
    def test_role_disabled(self, heroes, role):
        assert filter_heroes(heroes, role=role) == heroes

    def test_search_and_role_combined(self, heroes):
        assert names(filter_heroes(heroes, role="mage", search="HAR")) == ["Harith", "Pharsa"]

    def test_search_substring(self, heroes):
        assert names(filter_heroes(heroes, search="an")) == ["Angela", "Fanny", "Franco", "Lancelot"]


def test_static_catalog(heroes):
    catalog = StaticHeroCatalog(list(reversed(heroes)))
    assert catalog.list_heroes() == heroes
    assert catalog.get_hero("atlas").name == "Atlas"
    assert catalog.get_hero("missing") is None


@pytest.mark.django_db
class TestHeroCatalog:
    def test_lists_by_name(self, db_heroes):
        listed = HeroCatalog().list_heroes()
        assert names(listed) == sorted(names(listed))
        assert len(listed) == len(db_heroes)

    def test_unavailable_heroes_hidden(self, db_heroes):
        Hero.objects.filter(id="fanny").update(is_available=False)
        catalog = HeroCatalog()

        assert "Fanny" not in names(catalog.list_heroes())
        assert catalog.get_hero("fanny") is None
        with pytest.raises(UnknownHero):
            select_hero(start(), "fanny", catalog)

    def test_roles_property(self, db_heroes):
        assert Hero.objects.get(id="gusion").roles == ["assassin", "mage"]
        assert Hero.objects.get(id="atlas").roles == ["tank"]
