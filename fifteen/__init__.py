"""Sliding-tile puzzle engine."""

from fifteen.engine.shuffler import DEFAULT_SHUFFLE_MOVES, Shuffler
from fifteen.models import Board, Direction, ErrorKind, PuzzleError, Tile

__all__ = [
    "DEFAULT_SHUFFLE_MOVES",
    "Board",
    "Direction",
    "ErrorKind",
    "PuzzleError",
    "Shuffler",
    "Tile",
]

__version__ = "0.1.0"
