"""Mood-driven creature game pieces: moods, movement, levels, goal zones and screen states."""

__version__ = "0.1.0"