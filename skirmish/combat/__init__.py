"""
Combat system module for the simulator.

This module handles the turn order of an encounter, the resolution of each
turn slot and the read-only snapshots handed to observers.
"""

from .combat_round import CombatRound, apply_hit_die
from .events import (
    ActionReport,
    CombatantSnapshot,
    CombatObserver,
    EncounterSummary,
    ExperienceReport,
    NullObserver,
)
from .turn_order import merge_turn_order, roll_initiative, schedule_turns

__all__ = [
    # Import from combat_round.py
    "CombatRound",
    "apply_hit_die",
    # Import from events.py
    "ActionReport",
    "CombatantSnapshot",
    "CombatObserver",
    "EncounterSummary",
    "ExperienceReport",
    "NullObserver",
    # Import from turn_order.py
    "merge_turn_order",
    "roll_initiative",
    "schedule_turns",
]
