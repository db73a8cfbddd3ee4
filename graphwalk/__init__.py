"""Maze solving and friend group search over explicit graphs."""

__version__ = "1.0.0"
