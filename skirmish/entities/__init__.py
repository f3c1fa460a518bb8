"""
Entity module for the simulator.

Characters, monsters, encounters and adventures, plus the combatant
capability the combat engine works against.
"""

from .character import Character, level_from_xp, xp_for_level
from .combatant import Combatant, clamp_hp
from .encounter import Adventure, Encounter
from .monster import Monster

__all__ = [
    # Import from character.py
    "Character",
    "level_from_xp",
    "xp_for_level",
    # Import from combatant.py
    "Combatant",
    "clamp_hp",
    # Import from encounter.py
    "Adventure",
    "Encounter",
    # Import from monster.py
    "Monster",
]
