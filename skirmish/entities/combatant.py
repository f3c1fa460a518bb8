"""
Combatant capability shared by characters and monsters.

Characters and monsters do not share a base class; the combat code only relies
on the attributes and methods listed in :class:`Combatant`.
"""

from typing import Protocol, runtime_checkable

from skirmish.core.constants import CombatantKind


@runtime_checkable
class Combatant(Protocol):
    """Read/write surface the scheduler and the round engine work against."""

    name: str
    current_hp: int
    initiative: int
    turn_slot: int
    targeted: bool

    @property
    def kind(self) -> CombatantKind: ...

    @property
    def hp_max(self) -> int: ...

    def is_conscious(self) -> bool: ...

    def adjust_hp(self, amount: int) -> int: ...


def clamp_hp(value: int, maximum: int) -> int:
    """
    Clamps a hit point value to ``[0, maximum]``.

    Args:
        value (int): The raw value.
        maximum (int): The upper bound.

    Returns:
        int: The clamped value.

    """
    return max(0, min(value, maximum))
