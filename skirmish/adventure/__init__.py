"""
Adventure module for the simulator.

Authoring of encounters and adventures, the adventure lifecycle, and the
service user interfaces talk to.
"""

from .adventure_manager import AdventureResult, AdventureRun
from .authoring import (
    add_monster,
    build_adventure,
    can_add_monster,
    remove_monster,
    select_party,
)
from .service import AdventureService

__all__ = [
    # Import from adventure_manager.py
    "AdventureResult",
    "AdventureRun",
    # Import from authoring.py
    "add_monster",
    "build_adventure",
    "can_add_monster",
    "remove_monster",
    "select_party",
    # Import from service.py
    "AdventureService",
]
