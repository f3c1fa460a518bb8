"""
Persistence module for the simulator.

JSON file stores for characters, monsters and adventures.
"""

from .json_store import (
    AdventureStore,
    CharacterStore,
    JsonStore,
    MonsterStore,
    install_sample_data,
    open_stores,
)

__all__ = [
    # Import from json_store.py
    "AdventureStore",
    "CharacterStore",
    "JsonStore",
    "MonsterStore",
    "install_sample_data",
    "open_stores",
]
