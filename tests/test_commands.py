import json
from io import StringIO
from pathlib import Path
from unittest import mock

import pytest
import requests
from django.core.management import call_command
from django.core.management.base import CommandError

from draft.models import Hero

pytestmark = pytest.mark.django_db

FIXTURE = Path(__file__).resolve().parent.parent / "draft" / "fixtures" / "heroes.json"


def run(*args):
    out = StringIO()
    call_command(*args, stdout=out)
    return out.getvalue()


class TestLoadHeroes:
    def test_load_from_file(self):
        output = run("load_heroes", str(FIXTURE))
        total = len(json.loads(FIXTURE.read_text()))
        assert f"{total} created" in output
        assert Hero.objects.count() == total
        assert Hero.objects.get(id="gusion").roles == ["assassin", "mage"]

        output = run("load_heroes", str(FIXTURE))
        assert f"0 created, {total} updated" in output

    def test_roles_normalized(self, tmp_path):
        path = tmp_path / "heroes.json"
        path.write_text(json.dumps([{"id": "nana", "name": "Nana", "role1": "Mage", "role2": " SUPPORT "}]))
        run("load_heroes", str(path))
        assert Hero.objects.get(id="nana").roles == ["mage", "support"]

    def test_unknown_role(self, tmp_path):
        path = tmp_path / "heroes.json"
        path.write_text(json.dumps([{"id": "x", "name": "X", "role1": "jungler"}]))
        with pytest.raises(CommandError):
            run("load_heroes", str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(CommandError):
            run("load_heroes", str(tmp_path / "nope.json"))

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "heroes.json"
        path.write_text(json.dumps({"id": "x"}))
        with pytest.raises(CommandError):
            run("load_heroes", str(path))

    def test_load_from_url(self):
        response = mock.Mock()
        response.json.return_value = [{"id": "layla", "name": "Layla", "role1": "marksman", "is_available": False}]
        with mock.patch("draft.management.commands.load_heroes.requests.get", return_value=response) as get:
            run("load_heroes", "https://example.com/heroes.json")

        get.assert_called_once_with("https://example.com/heroes.json", timeout=30)
        assert Hero.objects.get(id="layla").is_available is False

    def test_url_failure(self):
        with mock.patch(
            "draft.management.commands.load_heroes.requests.get",
            side_effect=requests.ConnectionError("down"),
        ):
            with pytest.raises(CommandError):
                run("load_heroes", "https://example.com/heroes.json")


class TestSimulateDraft:
    def test_full_draft(self, db_heroes):
        output = run("simulate_draft", "--seed", "7", "--red", "Onic", "--blue", "RRQ")
        assert "DRAFT COMPLETE" in output
        assert "Red Team - Ban 1" in output
        assert "Blue Team - Pick 5" in output
        assert "Picks (5)" in output
        assert "Bans (5)" in output

    def test_same_seed_same_draft(self, db_heroes):
        assert run("simulate_draft", "--seed", "3") == run("simulate_draft", "--seed", "3")

    def test_undo_demo(self, db_heroes):
        output = run("simulate_draft", "--seed", "1", "--undo-demo")
        assert "undo ->" in output
        assert "redo ->" in output

    def test_needs_enough_heroes(self):
        Hero.objects.create(id="solo", name="Solo", role1="tank")
        with pytest.raises(CommandError):
            run("simulate_draft")
