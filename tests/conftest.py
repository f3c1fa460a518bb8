"""
Shared fixtures for the simulator tests.
"""

import random
from collections import deque

import pytest

from skirmish.core.constants import ChallengeTier
from skirmish.core.dice import DiceRoller
from skirmish.entities import Character, Monster


class ScriptedRoller(DiceRoller):
    """Returns queued values first, then falls back to a seeded generator."""

    def __init__(self, rolls=(), picks=(), seed: int = 0) -> None:
        super().__init__(random.Random(seed))
        self.rolls: deque[int] = deque(rolls)
        self.picks: deque[int] = deque(picks)

    def roll(self, sides: int) -> int:
        if self.rolls:
            value = self.rolls.popleft()
            assert 1 <= value <= sides, f"scripted roll {value} does not fit a d{sides}"
            return value
        return super().roll(sides)

    def pick(self, count: int) -> int:
        if self.picks:
            value = self.picks.popleft()
            assert 0 <= value < count, f"scripted pick {value} out of {count}"
            return value
        return super().pick(count)


@pytest.fixture
def scripted():
    """Factory for scripted rollers."""
    return ScriptedRoller


@pytest.fixture
def make_character():
    def _make(name="Hero", body=0, mind=0, spirit=0, xp=0, player="Tester", class_name="Adventurer"):
        return Character(
            name=name,
            player=player,
            xp=xp,
            body=body,
            mind=mind,
            spirit=spirit,
            class_name=class_name,
        )

    return _make


@pytest.fixture
def make_monster():
    def _make(
        name="Goblin",
        hit_points=8,
        experience=20,
        damage_dice="d4",
        challenge=ChallengeTier.NORMAL,
        initiative=0,
        damage_type="Slashing",
    ):
        return Monster(
            name=name,
            challenge=challenge,
            experience=experience,
            hit_points=hit_points,
            initiative=initiative,
            damage_dice=damage_dice,
            damage_type=damage_type,
        )

    return _make


@pytest.fixture
def party(make_character):
    """Three level 1 adventurers with 10 hit points each once initialized."""
    return [
        make_character("Aria"),
        make_character("Bram"),
        make_character("Cole"),
    ]
