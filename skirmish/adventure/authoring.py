"""
Authoring helpers for the simulator.

Builds encounters and adventures from the monster catalog and resolves the
party picked by a player, enforcing the boss limit and the size bounds before
anything reaches the combat engine.
"""

from collections.abc import Iterable

from catchery import log_warning

from skirmish.core.constants import (
    MAX_BOSSES_PER_ENCOUNTER,
    MAX_ENCOUNTERS,
    MAX_PARTY_SIZE,
    MIN_ENCOUNTERS,
    MIN_PARTY_SIZE,
)
from skirmish.core.errors import BossLimitError, PreconditionError
from skirmish.entities import Adventure, Character, Encounter, Monster


def can_add_monster(encounter: Encounter, monster: Monster, quantity: int = 1) -> bool:
    """
    Checks whether a monster can join an encounter without breaking the boss limit.

    Args:
        encounter (Encounter): The encounter being built.
        monster (Monster): The monster definition.
        quantity (int): How many instances would be added.

    Returns:
        bool: False for a boss when the encounter already holds one or when
        more than one instance is requested.

    """
    if not monster.is_boss:
        return True
    return encounter.boss_count + quantity <= MAX_BOSSES_PER_ENCOUNTER


def add_monster(encounter: Encounter, monster: Monster, quantity: int = 1) -> Encounter:
    """
    Appends instances of a monster to an encounter.

    Args:
        encounter (Encounter): The encounter being built.
        monster (Monster): The monster definition.
        quantity (int): How many instances to add, at least 1.

    Returns:
        Encounter: The same encounter, for chaining.

    Raises:
        PreconditionError: If the quantity is not positive.
        BossLimitError: If the boss limit would be exceeded.

    """
    if quantity < 1:
        raise PreconditionError(f"Quantity must be at least 1, got {quantity}")
    if not can_add_monster(encounter, monster, quantity):
        raise BossLimitError(
            f"Cannot add {quantity} x '{monster.name}': an encounter holds at most "
            f"{MAX_BOSSES_PER_ENCOUNTER} boss"
        )
    encounter.monsters.extend(monster.spawn() for _ in range(quantity))
    return encounter


def remove_monster(encounter: Encounter, name: str) -> int:
    """
    Removes every instance of the named monster.

    Returns:
        int: The number of instances removed.

    """
    removed = encounter.count_of(name)
    encounter.monsters = [m for m in encounter.monsters if m.name != name]
    return removed


def build_adventure(
    name: str,
    encounters: list[Encounter],
    existing_names: Iterable[str] = (),
) -> Adventure:
    """
    Validates and assembles a new adventure.

    Args:
        name (str): The adventure name, unique among the existing ones.
        encounters (list[Encounter]): One to four non-empty encounters.
        existing_names (Iterable[str]): Names already taken.

    Returns:
        Adventure: The new adventure.

    Raises:
        PreconditionError: If the name is empty or taken, or the encounters
            do not fit the adventure bounds.

    """
    name = name.strip() if name else ""
    if not name:
        raise PreconditionError("Adventure name cannot be empty")
    if name in set(existing_names):
        raise PreconditionError(f"An adventure named '{name}' already exists")
    if not MIN_ENCOUNTERS <= len(encounters) <= MAX_ENCOUNTERS:
        raise PreconditionError(
            f"An adventure needs between {MIN_ENCOUNTERS} and {MAX_ENCOUNTERS} "
            f"encounters, got {len(encounters)}"
        )
    for index, encounter in enumerate(encounters, start=1):
        if encounter.is_empty():
            raise PreconditionError(f"Encounter {index} has no monsters")
    return Adventure(name=name, encounters=encounters)


def select_party(available: list[Character], names: list[str]) -> list[Character]:
    """
    Resolves the characters picked for an adventure.

    Args:
        available (list[Character]): The characters the player can pick from.
        names (list[str]): The picked names, in party order.

    Returns:
        list[Character]: The picked characters.

    Raises:
        PreconditionError: If the party size is out of bounds, a name is
            repeated, or a name is not available.

    """
    if not MIN_PARTY_SIZE <= len(names) <= MAX_PARTY_SIZE:
        raise PreconditionError(
            f"A party needs between {MIN_PARTY_SIZE} and {MAX_PARTY_SIZE} members, "
            f"got {len(names)}"
        )
    if len(set(names)) != len(names):
        raise PreconditionError("A character can join the party only once")

    by_name = {character.name: character for character in available}
    missing = [name for name in names if name not in by_name]
    if missing:
        log_warning(
            "Unknown characters picked for the party.",
            {"missing": missing, "available": list(by_name)},
        )
        raise PreconditionError(f"Unknown characters: {', '.join(missing)}")
    return [by_name[name] for name in names]
