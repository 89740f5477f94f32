import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from draft.catalog import StaticHeroCatalog
from draft.models import Hero

HERO_ROWS = [
    ("alucard", "Alucard", "fighter", "assassin"),
    ("angela", "Angela", "support", None),
    ("atlas", "Atlas", "tank", None),
    ("beatrix", "Beatrix", "marksman", None),
    ("brody", "Brody", "marksman", None),
    ("chou", "Chou", "fighter", None),
    ("claude", "Claude", "marksman", None),
    ("estes", "Estes", "support", None),
    ("fanny", "Fanny", "assassin", None),
    ("franco", "Franco", "tank", None),
    ("gusion", "Gusion", "assassin", "mage"),
    ("harith", "Harith", "mage", None),
    ("johnson", "Johnson", "tank", "support"),
    ("kagura", "Kagura", "mage", None),
    ("khufra", "Khufra", "tank", None),
    ("lancelot", "Lancelot", "assassin", None),
    ("ling", "Ling", "assassin", None),
    ("lunox", "Lunox", "mage", None),
    ("mathilda", "Mathilda", "support", "assassin"),
    ("paquito", "Paquito", "fighter", None),
    ("pharsa", "Pharsa", "mage", None),
    ("tigreal", "Tigreal", "tank", None),
]


def make_heroes():
    return [Hero(id=i, name=n, role1=r1, role2=r2) for i, n, r1, r2 in HERO_ROWS]


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def heroes():
    return make_heroes()


@pytest.fixture
def catalog(heroes):
    return StaticHeroCatalog(heroes)


@pytest.fixture
def hero_ids(heroes):
    return [h.id for h in heroes]


@pytest.fixture
def db_heroes(db):
    return Hero.objects.bulk_create(make_heroes())


@pytest.fixture
def api_client():
    return APIClient()
