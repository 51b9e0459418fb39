"""Board model for the sliding puzzle.

Tiles live in a single flat list in row-major order, so a cell's index is
``row * side + col`` and its row/column are recovered with ``divmod``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum

from fifteen.models.errors import (
    CannotExchangeNoneZeroError,
    CannotExchangeNotNeighbouringError,
    PuzzleError,
    TileNotFoundError,
    ZeroNotFoundError,
)
from fifteen.models.tile import Tile

logger = logging.getLogger(__name__)

MIN_SIDE = 2


class Direction(StrEnum):
    """Where the *blank* is asked to move."""

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass
class Board:
    """Represents the sliding puzzle board.

    A new board is always solved: values ``1 .. side*side - 1`` in order,
    followed by the blank in the bottom-right corner.
    """

    side: int
    _cells: list[Tile] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.side, bool) or not isinstance(self.side, int):
            raise TypeError(f"Board side must be an int, got {self.side!r}.")
        if self.side < MIN_SIDE:
            raise ValueError(
                f"Board side must be at least {MIN_SIDE}, got {self.side}."
            )
        count = self.side * self.side
        self._cells = [Tile(i) for i in range(1, count)]
        self._cells.append(Tile(0))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, side: int, values: list[int]) -> Board:
        """Create a board from a flat row-major list of tile values.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        board = cls(side)
        if len(values) != len(board):
            raise ValueError(
                f"Expected {len(board)} tiles for a {side}×{side} board, "
                f"got {len(values)}."
            )
        if sorted(values) != list(range(len(board))):
            raise ValueError(
                f"Tile values must be exactly 0..{len(board) - 1}, "
                "each appearing once."
            )
        board._cells = [Tile(v) for v in values]
        return board

    def copy(self) -> Board:
        other = Board(self.side)
        other._cells = list(self._cells)
        return other

    # -- read-only views ------------------------------------------------------

    def __len__(self) -> int:
        return self.side * self.side

    def __str__(self) -> str:
        width = len(str(len(self) - 1))
        return "\n".join(
            " ".join(f"{v:>{width}}" if v else "." * width for v in row)
            for row in self.as_2d()
        )

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._cells)

    @property
    def values(self) -> list[int]:
        return [tile.value for tile in self._cells]

    def as_2d(self) -> list[list[int]]:
        """Return a row-major nested copy of the tile values."""
        values = self.values
        return [values[r * self.side : (r + 1) * self.side] for r in range(self.side)]

    # -- addressing -----------------------------------------------------------

    def index_of_point(self, row: int, col: int) -> int:
        return row * self.side + col

    def point_of_index(self, index: int) -> tuple[int, int]:
        return divmod(index, self.side)

    def tile_at_index(self, index: int) -> Tile | None:
        if 0 <= index < len(self):
            return self._cells[index]
        return None

    def tile_at_point(self, row: int, col: int) -> Tile | None:
        """Return the tile at (row, col), or None if the point is off the grid.

        Rows and columns are checked separately, so (0, side) is rejected
        even though its row-major index lands inside the board.
        """
        if not (0 <= row < self.side and 0 <= col < self.side):
            return None
        return self.tile_at_index(self.index_of_point(row, col))

    def index_of_value(self, value: int) -> int | None:
        for i, tile in enumerate(self._cells):
            if tile.value == value:
                return i
        return None

    @property
    def blank_index(self) -> int:
        index = self.index_of_value(0)
        if index is None:
            raise ZeroNotFoundError("The board has no blank tile.")
        return index

    # -- adjacency and exchange -----------------------------------------------

    def is_neighbouring(self, one: int, other: int) -> bool:
        """Return True if two cells are directly beside or above each other.

        Horizontal neighbours must share a row: the last cell of one row and
        the first cell of the next are one index apart but not adjacent.
        """
        diff = abs(one - other)
        if diff == self.side:
            return True
        return diff == 1 and one // self.side == other // self.side

    def exchange(self, one: int, other: int) -> None:
        """Swap two cells, one of which must be the blank.

        Raises:
            TileNotFoundError: an index is off the board.
            CannotExchangeNotNeighbouringError: the cells are not adjacent.
            CannotExchangeNoneZeroError: neither cell is the blank.
        """
        one_tile = self.tile_at_index(one)
        other_tile = self.tile_at_index(other)
        if one_tile is None or other_tile is None:
            bad = one if one_tile is None else other
            raise TileNotFoundError(
                f"Index {bad} is outside a board of {len(self)} cells."
            )
        if one == other:
            return
        if not self.is_neighbouring(one, other):
            raise CannotExchangeNotNeighbouringError(
                f"Cells {one} and {other} are not neighbours."
            )
        if not one_tile.is_blank and not other_tile.is_blank:
            raise CannotExchangeNoneZeroError(
                f"Neither cell {one} ({one_tile.value}) nor cell {other} "
                f"({other_tile.value}) is the blank."
            )
        self._cells[one], self._cells[other] = other_tile, one_tile

    # -- moves ----------------------------------------------------------------

    def directional_index(self, index: int, direction: Direction) -> int | None:
        """Return the index next to *index* in *direction*, or None at the edge."""
        if not 0 <= index < len(self):
            return None
        row, col = divmod(index, self.side)
        if direction is Direction.LEFT:
            return None if col == 0 else index - 1
        if direction is Direction.RIGHT:
            return None if col == self.side - 1 else index + 1
        if direction is Direction.TOP:
            return None if row == 0 else index - self.side
        return None if row == self.side - 1 else index + self.side

    def move_blank(self, direction: Direction) -> bool:
        """Move the blank one cell in *direction*.

        Moving into the edge is a legal no-op. Always returns True; errors
        from the exchange propagate.
        """
        blank = self.blank_index
        target = self.directional_index(blank, direction)
        if target is not None:
            self.exchange(blank, target)
        return True

    def move_tile_to_blank(self, index: int) -> bool:
        """Slide the tile at *index* into the blank.

        Returns True if the move was applied, False for any illegal move.
        """
        try:
            self.exchange(index, self.blank_index)
        except PuzzleError as exc:
            logger.debug("Rejected move of cell %s: %s", index, exc.kind)
            return False
        return True

    def move_tile_to_blank_by_point(self, row: int, col: int) -> bool:
        """Like ``move_tile_to_blank``; False for a point off the grid."""
        if self.tile_at_point(row, col) is None:
            return False
        return self.move_tile_to_blank(self.index_of_point(row, col))

    # -- queries --------------------------------------------------------------

    def is_win(self) -> bool:
        """Check the tiles against a freshly built solved board."""
        return self._cells == Board(self.side)._cells

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position.

        An index off the board is never correct.
        """
        tile = self.tile_at_index(index)
        if tile is None:
            return False
        return tile == Board(self.side).tile_at_index(index)
