from fifteen.models.board import MIN_SIDE, Board, Direction
from fifteen.models.errors import (
    CannotExchangeNoneZeroError,
    CannotExchangeNotNeighbouringError,
    ErrorKind,
    PuzzleError,
    TileNotFoundError,
    ZeroNotFoundError,
)
from fifteen.models.tile import Tile

__all__ = [
    "MIN_SIDE",
    "Board",
    "CannotExchangeNoneZeroError",
    "CannotExchangeNotNeighbouringError",
    "Direction",
    "ErrorKind",
    "PuzzleError",
    "Tile",
    "TileNotFoundError",
    "ZeroNotFoundError",
]
