"""
Core system module for the simulator.

This module contains the fundamental components the rest of the simulator is
built on: game constants, dice rolling, errors, logging and display utilities.
"""

from .constants import (
    AdventureOutcome,
    ChallengeTier,
    CombatantKind,
    CombatState,
    HitOutcome,
)
from .dice import DiceRoller, DiceSpec
from .errors import BossLimitError, PersistenceError, PreconditionError, SkirmishError
from .logging import setup_logging
from .utils import ccapture, cprint, crule, make_bar

__all__ = [
    # Import from constants.py
    "AdventureOutcome",
    "ChallengeTier",
    "CombatantKind",
    "CombatState",
    "HitOutcome",
    # Import from dice.py
    "DiceRoller",
    "DiceSpec",
    # Import from errors.py
    "BossLimitError",
    "PersistenceError",
    "PreconditionError",
    "SkirmishError",
    # Import from logging.py
    "setup_logging",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
]
