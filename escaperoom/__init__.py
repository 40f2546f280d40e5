"""
Escape Room - a single-room, turn-limited text adventure engine.
"""

__version__ = "0.1.0"
