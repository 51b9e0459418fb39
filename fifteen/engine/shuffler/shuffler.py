"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from fifteen.models.board import Board, Direction

logger = logging.getLogger(__name__)

# Number of random blank moves applied when no count is given.
DEFAULT_SHUFFLE_MOVES = 50

# Fixed draw order: one seed always yields the same walk.
DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


class Shuffler:
    """Creates solvable puzzles by walking the blank from the solved state.

    Tiles are only ever moved through ``Board.move_blank``; permuting tile
    values directly could produce a board that cannot be solved.
    """

    @staticmethod
    def solved(side: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board(side)

    @staticmethod
    def shuffle(
        board: Board,
        rng: random.Random,
        move_count: int = DEFAULT_SHUFFLE_MOVES,
    ) -> list[Direction]:
        """Move the blank of *board* in *move_count* random directions.

        Each step draws one direction uniformly from *rng*. A step into the
        edge leaves the board unchanged but still counts. Errors from the
        board stop the walk and propagate; the moves already made stay
        applied.

        Returns the directions drawn, in order.
        """
        if move_count < 0:
            raise ValueError(f"move_count must be non-negative, got {move_count}.")

        walk: list[Direction] = []
        for _ in range(move_count):
            direction = rng.choice(DIRECTIONS)
            board.move_blank(direction)
            walk.append(direction)

        logger.debug(
            "Shuffled %d×%d board with %d moves", board.side, board.side, move_count
        )
        return walk

    @staticmethod
    def generate(
        side: int,
        rng: random.Random,
        move_count: int = DEFAULT_SHUFFLE_MOVES,
    ) -> Board:
        """Return a random *solvable* board of the given side.

        The walk is repeated while it lands back on the solved state, so a
        game never starts already won.
        """
        board = Shuffler.solved(side)
        Shuffler.shuffle(board, rng, move_count)
        while move_count > 0 and board.is_win():
            logger.debug("Shuffle ended solved, shuffling again")
            Shuffler.shuffle(board, rng, move_count)
        return board
