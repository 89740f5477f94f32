import json
from pathlib import Path

import requests
from django.core.cache import cache
from django.core.management.base import BaseCommand, CommandError

from draft.models import Hero, ROLE_CHOICES

VALID_ROLES = {value for value, _ in ROLE_CHOICES}


def read_source(source, timeout=30):
    if source.startswith(("http://", "https://")):
        try:
            resp = requests.get(source, timeout=timeout)
            resp.raise_for_status()
            return resp.json()
        except requests.RequestException as e:
            raise CommandError(f"Failed to fetch heroes from {source}: {e}") from e
        except ValueError as e:
            raise CommandError(f"Response from {source} is not JSON") from e

    path = Path(source)
    if not path.exists():
        raise CommandError(f"Hero file not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise CommandError(f"{path} is not valid JSON: {e}") from e


def normalize_role(value):
    if not value:
        return None
    role = str(value).strip().lower()
    if role not in VALID_ROLES:
        raise CommandError(f"Unknown role: {value}")
    return role


class Command(BaseCommand):
    help = "Create or update heroes from a JSON list (file path or URL)"

    def add_arguments(self, parser):
        parser.add_argument("source", type=str, help="Path or http(s) URL of a JSON hero list")
        parser.add_argument("--timeout", type=int, default=30, help="HTTP timeout in seconds")

    def handle(self, *args, **options):
        data = read_source(options["source"], timeout=options["timeout"])
        if not isinstance(data, list):
            raise CommandError("Expected a JSON list of heroes")

        created = updated = 0
        for row in data:
            try:
                hero_id = str(row["id"])
                name = row["name"]
            except (KeyError, TypeError) as e:
                raise CommandError(f"Hero entry missing id or name: {row!r}") from e

            role1 = normalize_role(row.get("role1"))
            if role1 is None:
                raise CommandError(f"Hero {hero_id} has no primary role")

            _, was_created = Hero.objects.update_or_create(
                id=hero_id,
                defaults={
                    "name": name,
                    "role1": role1,
                    "role2": normalize_role(row.get("role2")),
                    "icon": row.get("icon") or None,
                    "is_available": bool(row.get("is_available", True)),
                },
            )
            if was_created:
                created += 1
            else:
                updated += 1

        # The hero list endpoint caches its response
        cache.clear()

        self.stdout.write(self.style.SUCCESS(f"Loaded heroes: {created} created, {updated} updated"))
