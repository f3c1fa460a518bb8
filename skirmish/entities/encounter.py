"""
Encounter and adventure models for the simulator.

An encounter is an ordered multiset of monster instances, an adventure is a
fixed sequence of one to four encounters.
"""

from typing import Any

from pydantic import BaseModel, Field

from skirmish.core.constants import MAX_BOSSES_PER_ENCOUNTER, MAX_ENCOUNTERS, MIN_ENCOUNTERS

from .monster import Monster


class Encounter(BaseModel):
    """A group of monster instances fought together."""

    monsters: list[Monster] = Field(
        default_factory=list,
        description="Monster instances, in insertion order",
    )

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if self.boss_count > MAX_BOSSES_PER_ENCOUNTER:
            raise ValueError(
                f"An encounter can hold at most {MAX_BOSSES_PER_ENCOUNTER} boss, "
                f"got {self.boss_count}"
            )

    @property
    def boss_count(self) -> int:
        return sum(1 for monster in self.monsters if monster.is_boss)

    @property
    def total_experience(self) -> int:
        """Sum of the experience of every monster instance."""
        return sum(monster.experience for monster in self.monsters)

    def is_empty(self) -> bool:
        return not self.monsters

    def count_of(self, name: str) -> int:
        """Number of instances of the named monster."""
        return sum(1 for monster in self.monsters if monster.name == name)

    def summarize(self) -> list[tuple[str, int]]:
        """
        Groups the instances by name.

        Returns:
            list[tuple[str, int]]: ``(name, quantity)`` pairs in order of first
            appearance.

        """
        quantities: dict[str, int] = {}
        for monster in self.monsters:
            quantities[monster.name] = quantities.get(monster.name, 0) + 1
        return list(quantities.items())

    def spawn(self) -> "Encounter":
        """Returns a copy holding independent monster instances."""
        return Encounter(monsters=[monster.spawn() for monster in self.monsters])


class Adventure(BaseModel):
    """A named, immutable sequence of encounters."""

    name: str = Field(description="Unique name of the adventure")
    encounters: list[Encounter] = Field(description="The encounters, played in order")

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be a non-empty string")
        if not MIN_ENCOUNTERS <= len(self.encounters) <= MAX_ENCOUNTERS:
            raise ValueError(
                f"An adventure needs between {MIN_ENCOUNTERS} and {MAX_ENCOUNTERS} "
                f"encounters, got {len(self.encounters)}"
            )
        for index, encounter in enumerate(self.encounters, start=1):
            if encounter.is_empty():
                raise ValueError(f"Encounter {index} of '{self.name}' has no monsters")

    def spawn(self) -> "Adventure":
        """Returns a playable copy with independent monster instances."""
        return Adventure(
            name=self.name,
            encounters=[encounter.spawn() for encounter in self.encounters],
        )
