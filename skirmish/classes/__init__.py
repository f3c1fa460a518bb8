"""
Class actions for the simulator.

Importing this package registers every built-in class.
"""

from .adventurer import ADVENTURER, AdventurerActions
from .class_actions import (
    NO_OP_ACTIONS,
    ClassActions,
    get_class_actions,
    register_class_actions,
    registered_classes,
    unregister_class_actions,
)

register_class_actions(ADVENTURER, AdventurerActions())

__all__ = [
    # Import from adventurer.py
    "ADVENTURER",
    "AdventurerActions",
    # Import from class_actions.py
    "NO_OP_ACTIONS",
    "ClassActions",
    "get_class_actions",
    "register_class_actions",
    "registered_classes",
    "unregister_class_actions",
]
