"""
Skirmish: a turn-based party versus monsters encounter simulator.

A party of three to five characters plays an adventure made of one to four
encounters. Each encounter is fought in rounds of initiative-ordered turns;
survivors earn experience and rest before the next one.
"""

__version__ = "0.1.0"
