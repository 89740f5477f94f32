import random

from django.core.management.base import BaseCommand, CommandError

from draft.catalog import HeroCatalog
from draft.engine import (
    ActionKind,
    Side,
    available,
    counts,
    current_phase,
    is_complete,
    select_hero,
    start,
    undo,
)


class Command(BaseCommand):
    help = "Walks a full pick/ban draft, choosing random available heroes for each phase"

    def add_arguments(self, parser):
        parser.add_argument('--red', type=str, default="Red", help="Name of Red Team")
        parser.add_argument('--blue', type=str, default="Blue", help="Name of Blue Team")
        parser.add_argument('--seed', type=int, default=None, help="Random seed for reproducible drafts")
        parser.add_argument('--undo-demo', action='store_true', help="Undo and redo the final action before finishing")

    def handle(self, *args, **options):
        rng = random.Random(options["seed"])
        catalog = HeroCatalog()
        heroes = catalog.list_heroes()
        state = start()

        if len(heroes) < len(state.sequence):
            raise CommandError(
                f"Need at least {len(state.sequence)} available heroes, found {len(heroes)}. Run load_heroes first."
            )

        names = {Side.RED: options["red"], Side.BLUE: options["blue"]}
        hero_names = {h.id: h.name for h in heroes}

        self.stdout.write(self.style.SUCCESS("=== Draft Simulator ==="))
        self.stdout.write(f"🔴 RED: {names[Side.RED]}")
        self.stdout.write(f"🔵 BLUE: {names[Side.BLUE]}\n")

        while not is_complete(state):
            phase = current_phase(state)
            hero = rng.choice(available(state, heroes))
            event = select_hero(state, hero.id, catalog)
            self.stdout.write(f"[{event.step + 1:>2}] {phase.label}: {hero.name}")

            if options["undo_demo"] and current_phase(state) is None:
                undone = undo(state)
                self.stdout.write(f"     undo -> {hero_names[undone.hero_id]} returned to the pool")
                select_hero(state, undone.hero_id, catalog)
                self.stdout.write(f"     redo -> {hero_names[undone.hero_id]}")

        self.stdout.write("\n=== DRAFT COMPLETE ===")
        tally = counts(state)
        for side in Side:
            picks = [hero_names[e.hero_id] for e in state.history if e.side == side and e.action == ActionKind.PICK]
            bans = [hero_names[e.hero_id] for e in state.history if e.side == side and e.action == ActionKind.BAN]
            self.stdout.write(f"\n{names[side]} ({side.label}):")
            self.stdout.write(f"Picks ({tally[(side, ActionKind.PICK)]}): {', '.join(picks)}")
            self.stdout.write(f"Bans ({tally[(side, ActionKind.BAN)]}): {', '.join(bans)}")
