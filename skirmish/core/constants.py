"""
Constants and enumerations for the simulator.

Defines the game tables (levels, dice sizes, party and adventure bounds) and
the enumerations shared by the entities, the combat engine and the adventure
lifecycle.
"""

from enum import Enum

# Experience needed to reach each level, indexed by level - 1.
LEVEL_THRESHOLDS: tuple[int, ...] = (0, 100, 200, 300, 400, 500, 600, 700, 800, 900)
MIN_LEVEL = 1
MAX_LEVEL = len(LEVEL_THRESHOLDS)

# Hit points per level before the body modifier is added.
BASE_HIT_POINTS = 10

# Dice used by the combat rules.
HIT_DIE_SIDES = 10
INITIATIVE_DIE_SIDES = 12
CRITICAL_HIT_ROLL = 10
FAILED_HIT_ROLL = 1

# Party and adventure bounds.
MIN_PARTY_SIZE = 3
MAX_PARTY_SIZE = 5
MIN_ENCOUNTERS = 1
MAX_ENCOUNTERS = 4
MAX_BOSSES_PER_ENCOUNTER = 1

# Default data files, relative to the data directory.
CHARACTERS_FILE = "characters.json"
MONSTERS_FILE = "monsters.json"
ADVENTURES_FILE = "adventures.json"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name


class ChallengeTier(NiceEnum):
    """Classification of a monster, controlling quantity limits and attack breadth."""

    NORMAL = "Normal"
    BOSS = "Boss"


class CombatState(NiceEnum):
    """State of a single encounter's combat."""

    ACTIVE = "ACTIVE"
    PARTY_DEFEATED = "PARTY_DEFEATED"
    MONSTERS_DEFEATED = "MONSTERS_DEFEATED"

    @property
    def is_over(self) -> bool:
        return self is not CombatState.ACTIVE


class HitOutcome(NiceEnum):
    """Result class of a hit die roll."""

    FAIL = "FAIL"
    HIT = "HIT"
    CRITICAL = "CRITICAL"

    @staticmethod
    def from_roll(roll: int) -> "HitOutcome":
        if roll == CRITICAL_HIT_ROLL:
            return HitOutcome.CRITICAL
        if roll == FAILED_HIT_ROLL:
            return HitOutcome.FAIL
        return HitOutcome.HIT


class AdventureOutcome(NiceEnum):
    """Final result of an adventure run."""

    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"


class CombatantKind(NiceEnum):
    """Which side a combatant fights for."""

    CHARACTER = "CHARACTER"
    MONSTER = "MONSTER"

    @property
    def emoji(self) -> str:
        return {
            CombatantKind.CHARACTER: "👤",
            CombatantKind.MONSTER: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        return {
            CombatantKind.CHARACTER: "bold blue",
            CombatantKind.MONSTER: "bold red",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies side color formatting to a message."""
        return f"[{self.color}]{message}[/]"
