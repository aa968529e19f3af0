"""Ludoteca: administration of a board-game lending library."""

__version__ = "1.0.0"
