"""
Monster module for the simulator.

Defines the monster definition record. A definition can be spawned several
times into one encounter; each spawned instance tracks its own hit points,
initiative, turn slot and targeted flag once the battle starts.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from skirmish.core.constants import ChallengeTier, CombatantKind
from skirmish.core.dice import DiceRoller, DiceSpec

from .combatant import clamp_hp


class Monster(BaseModel):
    """A monster definition, or one instance of it inside an encounter."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Name of the monster")
    challenge: ChallengeTier = Field(
        default=ChallengeTier.NORMAL,
        description="Challenge tier, Normal or Boss",
    )
    experience: int = Field(ge=0, description="Experience awarded when defeated")
    hit_points: int = Field(alias="hitPoints", gt=0, description="Maximum hit points")
    initiative: int = Field(
        default=0,
        description="Base initiative modifier, overwritten by the rolled initiative",
    )
    damage_dice: str = Field(alias="damageDice", description="Damage dice, e.g. 'd8'")
    damage_type: str = Field(
        default="physical",
        alias="damageType",
        description="Free-form damage type, used for display only",
    )

    # === Combat-session fields ===

    current_hp: int = Field(default=0, exclude=True)
    turn_slot: int = Field(default=-1, exclude=True)
    targeted: bool = Field(default=False, exclude=True)

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")
        # Fails early on malformed notation.
        DiceSpec.parse(self.damage_dice)

    @property
    def kind(self) -> CombatantKind:
        return CombatantKind.MONSTER

    @property
    def is_boss(self) -> bool:
        return self.challenge is ChallengeTier.BOSS

    @property
    def hp_max(self) -> int:
        return self.hit_points

    @property
    def damage(self) -> DiceSpec:
        """The parsed damage dice."""
        return DiceSpec.parse(self.damage_dice)

    def spawn(self) -> "Monster":
        """Returns an independent instance of this definition."""
        return self.model_copy(deep=True)

    def initialize_hp(self) -> int:
        self.current_hp = self.hit_points
        return self.current_hp

    def roll_damage(self, roller: DiceRoller) -> int:
        """Rolls the damage dice."""
        return self.damage.roll(roller)

    def is_conscious(self) -> bool:
        return self.current_hp > 0

    def adjust_hp(self, amount: int) -> int:
        """
        Adjusts the current hit points, clamped to ``[0, hit_points]``.

        Args:
            amount (int): Positive to heal, negative to damage.

        Returns:
            int: The change actually applied.

        """
        previous = self.current_hp
        self.current_hp = clamp_hp(self.current_hp + amount, self.hit_points)
        return self.current_hp - previous
