"""
Main entry point for the simulator.

Loads the characters, monsters and adventures from the data directory, lets
the player pick an adventure and a party, plays the adventure and saves the
experience the party earned.
"""

import argparse
import logging
import random
import sys
from pathlib import Path

from skirmish import __version__
from skirmish.adventure import AdventureService
from skirmish.core.dice import DiceRoller
from skirmish.core.errors import SkirmishError
from skirmish.core.logging import setup_logging
from skirmish.core.utils import cprint, crule
from skirmish.persistence import install_sample_data, open_stores
from skirmish.ui import ConsoleRenderer, PlayerInterface

# Relative to the working directory, filled with the sample records if empty.
DEFAULT_DATA_DIR = Path("data")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skirmish",
        description="Turn-based party versus monsters encounter simulator",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help="Directory holding characters.json, monsters.json and adventures.json",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    parser.add_argument("--adventure", default=None, help="Adventure to play, skips the prompt")
    parser.add_argument(
        "--party",
        default=None,
        help="Comma separated character names, skips the prompt",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)"
    )
    return parser


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(_log_level(args.verbose))

    crule("Skirmish", style="bold green")

    ui = PlayerInterface()
    interactive = not (args.adventure and args.party)

    try:
        install_sample_data(args.data_dir)
        characters, monsters, adventures = open_stores(args.data_dir)
        service = AdventureService(characters, monsters, adventures)

        if args.adventure:
            adventure_name = args.adventure
        else:
            adventure = ui.choose_adventure(service.available_adventures())
            if adventure is None:
                cprint("No adventure selected.", style="bold yellow")
                return 0
            adventure_name = adventure.name

        if args.party:
            party_names = [name.strip() for name in args.party.split(",") if name.strip()]
        else:
            every_character = service.available_characters()
            player = ui.ask_player([c.player for c in every_character])
            party = ui.choose_party(service.available_characters(player))
            if party is None:
                cprint("No party selected.", style="bold yellow")
                return 0
            party_names = [c.name for c in party]

        rng = random.Random(args.seed) if args.seed is not None else None
        result = service.start_adventure(
            adventure_name,
            party_names,
            roller=DiceRoller(rng),
            observer=ConsoleRenderer(),
        )
        if interactive and result.is_victory and not ui.confirm("Save the experience earned?"):
            cprint("Progress not saved.", style="bold yellow")
            return 0
        for record in service.save_progress(result):
            cprint(f"Saved {record.name}: {record.xp} XP, level {record.level}.", style="green")
    except SkirmishError as e:
        cprint(f"[bold red]Error:[/] {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
