"""Errors raised by the board when a move cannot be applied."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    ZERO_NOT_FOUND = "zero_not_found"
    CANNOT_EXCHANGE_NONE_ZERO = "cannot_exchange_none_zero"
    CANNOT_EXCHANGE_NOT_NEIGHBOURING = "cannot_exchange_not_neighbouring"
    NOT_FOUND = "not_found"


class PuzzleError(Exception):
    """Base class for every recoverable board error.

    ``kind`` tells callers which rule was broken without having to match on
    the concrete exception class.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ZeroNotFoundError(PuzzleError):
    """The board has no blank tile — it has been corrupted."""

    kind = ErrorKind.ZERO_NOT_FOUND


class CannotExchangeNoneZeroError(PuzzleError):
    """Neither of the two tiles is the blank."""

    kind = ErrorKind.CANNOT_EXCHANGE_NONE_ZERO


class CannotExchangeNotNeighbouringError(PuzzleError):
    """The two cells are not directly next to each other."""

    kind = ErrorKind.CANNOT_EXCHANGE_NOT_NEIGHBOURING


class TileNotFoundError(PuzzleError, IndexError):
    """An index does not address a cell of the board."""

    kind = ErrorKind.NOT_FOUND
