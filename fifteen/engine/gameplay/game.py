"""Core gameplay logic — turns player input into board moves."""

from __future__ import annotations

import random

from fifteen.engine.gamestate import GameState
from fifteen.engine.shuffler import DEFAULT_SHUFFLE_MOVES, Shuffler
from fifteen.models.board import Board, Direction


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(
        self,
        side: int,
        rng: random.Random | None = None,
        shuffle_moves: int = DEFAULT_SHUFFLE_MOVES,
    ) -> None:
        self.side = side
        self.rng = rng if rng is not None else random.Random()
        board = Shuffler.generate(side, self.rng, shuffle_moves)
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a game session around an existing board."""
        obj = object.__new__(cls)
        obj.side = board.side
        obj.rng = random.Random()
        obj.state = GameState(board)
        return obj

    @property
    def board(self) -> Board:
        return self.state.board

    # -- movement (direction = where the *tile* slides) -----------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.TOP`` slides the tile **below** the blank upward,
        so the blank itself moves to the bottom. Returns False when there is
        no tile on that side of the blank.
        """
        board = self.board
        blank = board.blank_index
        if board.directional_index(blank, direction.opposite) is None:
            return False

        board.move_blank(direction.opposite)
        self.state.record(direction.opposite)
        return True

    def move_tile(self, row: int, col: int) -> bool:
        """Move the tile at (row, col) into the adjacent blank.

        Returns True if the board changed.
        """
        board = self.board
        blank = board.blank_index
        target = board.index_of_point(row, col)
        if target == blank:
            return False
        if not board.move_tile_to_blank_by_point(row, col):
            return False

        for direction in Direction:
            if board.directional_index(blank, direction) == target:
                self.state.record(direction)
                break
        return True

    def undo(self) -> bool:
        """Take back the last slide. Returns False if there is none."""
        direction = self.state.take_back()
        if direction is None:
            return False
        self.board.move_blank(direction)
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
