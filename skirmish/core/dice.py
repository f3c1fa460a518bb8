"""
Dice module for the simulator.

Provides the injectable random source used by every roll in a run, and a
small dice notation model ("d8", "2d6+1") for monster damage.
"""

import random
import re
from typing import Any, ClassVar

from pydantic import BaseModel, Field


class DiceRoller:
    """
    Sequential random source shared by the scheduler, the round engine and the
    adventure lifecycle.

    Passing a seeded ``random.Random`` makes a run reproducible.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng: random.Random = rng if rng is not None else random.Random()

    def roll(self, sides: int) -> int:
        """
        Rolls a single die.

        Args:
            sides (int): Number of faces, must be positive.

        Returns:
            int: A value in ``[1, sides]``.

        """
        if sides <= 0:
            raise ValueError(f"Invalid dice sides: {sides}")
        return self.rng.randint(1, sides)

    def pick(self, count: int) -> int:
        """
        Picks a uniformly random index.

        Args:
            count (int): Size of the collection, must be positive.

        Returns:
            int: A value in ``[0, count)``.

        """
        if count <= 0:
            raise ValueError(f"Cannot pick from {count} elements")
        return self.rng.randrange(count)


class DiceSpec(BaseModel):
    """A parsed dice expression of the form ``[count]d<sides>[+/-modifier]``."""

    DICE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^\s*(\d*)\s*d\s*(\d+)\s*([+-]\s*\d+)?\s*$", re.IGNORECASE)

    count: int = Field(default=1, description="Number of dice rolled")
    sides: int = Field(description="Number of faces of each die")
    modifier: int = Field(default=0, description="Flat value added to the sum")

    def model_post_init(self, _: Any) -> None:
        """Validates fields after model initialization."""
        if self.count <= 0:
            raise ValueError(f"Invalid dice count: {self.count}")
        if self.sides <= 0:
            raise ValueError(f"Invalid dice sides: {self.sides}")

    @classmethod
    def parse(cls, expression: str) -> "DiceSpec":
        """
        Parses a dice expression.

        Args:
            expression (str): Expression like "d8", "1d8" or "2d6+1".

        Returns:
            DiceSpec: The parsed expression.

        Raises:
            ValueError: If the expression is not valid dice notation.

        """
        if not expression:
            raise ValueError("Invalid dice expression: empty")
        match = cls.DICE_PATTERN.match(expression)
        if match is None:
            raise ValueError(f"Invalid dice expression: {expression!r}")
        count_str, sides_str, modifier_str = match.groups()
        return cls(
            count=int(count_str) if count_str else 1,
            sides=int(sides_str),
            modifier=int(modifier_str.replace(" ", "")) if modifier_str else 0,
        )

    def roll(self, roller: DiceRoller) -> int:
        """Rolls the expression with the given roller."""
        return sum(roller.roll(self.sides) for _ in range(self.count)) + self.modifier

    def __str__(self) -> str:
        text = f"d{self.sides}" if self.count == 1 else f"{self.count}d{self.sides}"
        if self.modifier:
            text += f"{self.modifier:+d}"
        return text
