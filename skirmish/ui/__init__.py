"""
User interface module for the simulator.

Console prompts for choosing an adventure and a party, and the renderer that
prints an adventure run.
"""

from .cli_interface import PlayerInterface
from .renderer import ConsoleRenderer

__all__ = [
    # Import from cli_interface.py
    "PlayerInterface",
    # Import from renderer.py
    "ConsoleRenderer",
]
