"""Packed RNA chains, typed CSV reading, Game of Life and a robot-exploration game."""

__version__ = "1.0.0"