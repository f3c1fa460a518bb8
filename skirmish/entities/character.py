"""
Character module for the simulator.

Defines the party member record, the experience/level table and the
transient combat-session fields that live only for one adventure run.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from skirmish.core.constants import (
    BASE_HIT_POINTS,
    LEVEL_THRESHOLDS,
    MAX_LEVEL,
    MIN_LEVEL,
    CombatantKind,
)

from .combatant import clamp_hp


def level_from_xp(xp: int) -> int:
    """
    Derives the level from the experience points.

    Args:
        xp (int): Experience points, must be non-negative.

    Returns:
        int: A level in ``[1, 10]``.

    """
    if xp < 0:
        raise ValueError(f"Experience cannot be negative: {xp}")
    level = MIN_LEVEL
    for candidate, threshold in enumerate(LEVEL_THRESHOLDS, start=MIN_LEVEL):
        if xp >= threshold:
            level = candidate
    return level


def xp_for_level(level: int) -> int:
    """
    Returns the experience a freshly created character of the given level has.

    Args:
        level (int): A level in ``[1, 10]``.

    Returns:
        int: The lowest experience value mapping to that level.

    """
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise ValueError(f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {level}")
    return LEVEL_THRESHOLDS[level - 1]


class Character(BaseModel):
    """
    A party member.

    The persisted part of the record is the name, owner, experience, the three
    base attributes and the class tag. Hit points, initiative, turn slot and the
    targeted flag are combat-session fields: they are never serialized.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Unique name of the character")
    player: str = Field(description="Name of the player owning the character")
    xp: int = Field(default=0, ge=0, description="Accumulated experience points")
    body: int = Field(ge=-1, le=3, description="Body attribute")
    mind: int = Field(ge=-1, le=3, description="Mind attribute")
    spirit: int = Field(ge=-1, le=3, description="Spirit attribute")
    class_name: str = Field(
        default="Adventurer",
        alias="class",
        validation_alias=AliasChoices("class", "class_", "class_name"),
        description="Class tag selecting the class actions",
    )

    # === Combat-session fields ===

    max_hp: int = Field(default=0, exclude=True)
    current_hp: int = Field(default=0, exclude=True)
    initiative: int = Field(default=0, exclude=True)
    turn_slot: int = Field(default=-1, exclude=True)
    targeted: bool = Field(default=False, exclude=True)

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")

    @property
    def kind(self) -> CombatantKind:
        return CombatantKind.CHARACTER

    @property
    def level(self) -> int:
        """Level derived from the experience points."""
        return level_from_xp(self.xp)

    @property
    def hp_max(self) -> int:
        return self.max_hp

    def initialize_hp(self) -> int:
        """
        Sets maximum and current hit points to ``(10 + body) * level``.

        Returns:
            int: The new maximum.

        """
        self.max_hp = (BASE_HIT_POINTS + self.body) * self.level
        self.current_hp = self.max_hp
        return self.max_hp

    def is_conscious(self) -> bool:
        return self.current_hp > 0

    def adjust_hp(self, amount: int) -> int:
        """
        Adjusts the current hit points, clamped to ``[0, max_hp]``.

        Args:
            amount (int): Positive to heal, negative to damage.

        Returns:
            int: The change actually applied.

        """
        previous = self.current_hp
        self.current_hp = clamp_hp(self.current_hp + amount, self.max_hp)
        return self.current_hp - previous

    def gain_experience(self, amount: int) -> bool:
        """
        Adds experience points.

        Args:
            amount (int): The experience gained.

        Returns:
            bool: True if the character reached a higher level.

        """
        old_level = self.level
        self.xp += amount
        return self.level > old_level

    def reset_combat_state(self) -> None:
        """Discards the combat-session fields."""
        self.max_hp = 0
        self.current_hp = 0
        self.initiative = 0
        self.turn_slot = -1
        self.targeted = False

    def __hash__(self) -> int:
        return hash(self.name)
