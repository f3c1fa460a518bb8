"""
Turn order module for the simulator.

Rolls initiative for the party and the monsters of an encounter and merges
both groups into a single turn sequence.
"""

from skirmish.classes import get_class_actions
from skirmish.core.constants import INITIATIVE_DIE_SIDES
from skirmish.core.dice import DiceRoller
from skirmish.core.logging import log_debug
from skirmish.entities.character import Character
from skirmish.entities.combatant import Combatant
from skirmish.entities.encounter import Encounter
from skirmish.entities.monster import Monster


def roll_initiative(
    party: list[Character],
    monsters: list[Monster],
    roller: DiceRoller,
) -> None:
    """
    Rolls the initiative of every combatant.

    Characters roll through their class rule; classes without one keep their
    current initiative. Monsters roll d12 plus their base modifier, and the
    result replaces the base modifier.

    Args:
        party (list[Character]): The party members.
        monsters (list[Monster]): The live monsters of the encounter.
        roller (DiceRoller): The random source.

    """
    for character in party:
        initiative = get_class_actions(character.class_name).roll_initiative(character, roller)
        if initiative is not None:
            character.initiative = initiative
    for monster in monsters:
        monster.initiative = roller.roll(INITIATIVE_DIE_SIDES) + monster.initiative


def merge_turn_order(party: list[Character], monsters: list[Monster]) -> list[Combatant]:
    """
    Sorts both groups by descending initiative and merges them.

    Sorting is stable and happens in place, so ties keep their previous
    relative order inside each group. While merging, a character goes first
    only when its initiative is strictly greater than the monster's. Each
    combatant receives its 0-based turn slot.

    Args:
        party (list[Character]): The party members, sorted in place.
        monsters (list[Monster]): The live monsters, sorted in place.

    Returns:
        list[Combatant]: The combined turn sequence.

    """
    party.sort(key=lambda c: c.initiative, reverse=True)
    monsters.sort(key=lambda m: m.initiative, reverse=True)

    order: list[Combatant] = []
    c_index, m_index = 0, 0
    while c_index < len(party) or m_index < len(monsters):
        if c_index < len(party) and m_index < len(monsters):
            take_character = party[c_index].initiative > monsters[m_index].initiative
        else:
            take_character = c_index < len(party)
        if take_character:
            combatant: Combatant = party[c_index]
            c_index += 1
        else:
            combatant = monsters[m_index]
            m_index += 1
        combatant.turn_slot = len(order)
        order.append(combatant)
    return order


def schedule_turns(
    party: list[Character],
    encounter: Encounter,
    roller: DiceRoller,
) -> list[Combatant]:
    """
    Rolls initiative and assigns turn slots for one encounter.

    Args:
        party (list[Character]): The party members.
        encounter (Encounter): The encounter being fought.
        roller (DiceRoller): The random source.

    Returns:
        list[Combatant]: The combined turn sequence.

    """
    roll_initiative(party, encounter.monsters, roller)
    order = merge_turn_order(party, encounter.monsters)
    log_debug(
        "Turn order set",
        {"order": ", ".join(f"{c.turn_slot}:{c.name}({c.initiative})" for c in order)},
    )
    return order
