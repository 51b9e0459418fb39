"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time

from fifteen.models.board import Board, Direction


class GameState:
    """Holds the board, the blank's path so far, and a pausable clock.

    ``path`` lists the directions the blank has moved in, oldest first.
    Every entry is a real move (never an edge no-op), so walking the path
    backwards with opposite directions returns the board to where the game
    started. ``moves`` counts every slide, undos included.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0
        self.path: list[Direction] = []
        self._started_at: float = time.monotonic()
        self._banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._banked + (time.monotonic() - self._started_at)
        return self._banked

    @property
    def is_running(self) -> bool:
        return self._running

    def pause(self) -> None:
        if self._running:
            self._banked += time.monotonic() - self._started_at
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._started_at = time.monotonic()
            self._running = True

    # -- blank path -----------------------------------------------------------

    def record(self, direction: Direction) -> None:
        """Note that the blank just moved one cell in *direction*."""
        self.path.append(direction)
        self.moves += 1

    def take_back(self) -> Direction | None:
        """Pop the last blank move and return the direction that reverses it.

        Returns None when nothing has been played yet. The reversing slide
        still counts as a move.
        """
        if not self.path:
            return None
        self.moves += 1
        return self.path.pop().opposite

    @property
    def is_solved(self) -> bool:
        return self.board.is_win()
