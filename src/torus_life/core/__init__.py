"""Core universe logic."""

from .cell import Cell
from .universe import Universe

__all__ = ["Cell", "Universe"]
