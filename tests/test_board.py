"""Board test suite — construction, addressing, exchange and blank moves.

Most cases use the solved 3×3 board::

    1 2 3
    4 5 6
    7 8 .
"""

from __future__ import annotations

import random

import pytest

from fifteen.models import (
    Board,
    CannotExchangeNoneZeroError,
    CannotExchangeNotNeighbouringError,
    Direction,
    ErrorKind,
    PuzzleError,
    Tile,
    TileNotFoundError,
    ZeroNotFoundError,
)

SOLVED_3x3 = [1, 2, 3, 4, 5, 6, 7, 8, 0]


# -- helpers ------------------------------------------------------------------


def _assert_invariants(board: Board) -> None:
    values = board.values
    assert len(values) == board.side * board.side
    assert values.count(0) == 1
    assert sorted(values) == list(range(board.side * board.side))


# -- tiles --------------------------------------------------------------------


def test_tile_equality_is_by_value() -> None:
    assert Tile(3) == Tile(3)
    assert Tile(3) != Tile(4)
    assert Tile(0).is_blank
    assert not Tile(1).is_blank


def test_tile_rejects_negative_value() -> None:
    with pytest.raises(ValueError):
        Tile(-1)


# -- construction -------------------------------------------------------------


@pytest.mark.parametrize("side", [2, 3, 4, 5, 8])
def test_new_board_is_solved(side: int) -> None:
    board = Board(side)
    assert board.is_win()
    assert len(board) == side * side
    assert board.values[:-1] == list(range(1, side * side))
    assert board.values[-1] == 0
    _assert_invariants(board)


@pytest.mark.parametrize("side", [-2, 0, 1])
def test_degenerate_side_is_rejected(side: int) -> None:
    with pytest.raises(ValueError, match="at least 2"):
        Board(side)


@pytest.mark.parametrize("side", [2.0, "3", True])
def test_non_int_side_is_rejected(side: object) -> None:
    with pytest.raises(TypeError):
        Board(side)  # type: ignore[arg-type]


def test_from_flat() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert board.blank_index == 7
    assert not board.is_win()


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 3, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],
        [1, 1, 3, 4, 5, 6, 7, 8, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
    ],
)
def test_from_flat_rejects_broken_tile_sets(values: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(3, values)


def test_copy_is_independent() -> None:
    board = Board(3)
    other = board.copy()
    assert other == board
    other.move_blank(Direction.LEFT)
    assert board.is_win()
    assert other != board


# -- snapshots ----------------------------------------------------------------


def test_as_2d() -> None:
    assert Board(3).as_2d() == [[1, 2, 3], [4, 5, 6], [7, 8, 0]]


def test_snapshots_are_copies() -> None:
    board = Board(3)
    rows = board.as_2d()
    rows[0][0] = 99
    values = board.values
    values[0] = 99
    assert board.is_win()
    assert isinstance(board.tiles, tuple)
    assert board.tiles[0] == Tile(1)


def test_str() -> None:
    assert str(Board(2)) == "1 2\n3 ."
    assert str(Board(4)).splitlines()[-1] == "13 14 15 .."


# -- addressing ---------------------------------------------------------------


def test_tile_at_point() -> None:
    board = Board(3)
    expected = iter(SOLVED_3x3)
    for row in range(3):
        for col in range(3):
            assert board.tile_at_point(row, col) == Tile(next(expected))


def test_index_of_point_and_back() -> None:
    board = Board(4)
    assert board.index_of_point(2, 3) == 11
    assert board.point_of_index(11) == (2, 3)


@pytest.mark.parametrize("index", [-1, 9, 100])
def test_tile_at_index_out_of_range(index: int) -> None:
    assert Board(3).tile_at_index(index) is None


@pytest.mark.parametrize("point", [(0, 3), (3, 0), (-1, 0), (0, -1)])
def test_tile_at_point_out_of_range(point: tuple[int, int]) -> None:
    assert Board(3).tile_at_point(*point) is None


def test_index_of_value() -> None:
    board = Board(3)
    assert board.index_of_value(5) == 4
    assert board.index_of_value(0) == 8
    assert board.index_of_value(9) is None


# -- adjacency ----------------------------------------------------------------


@pytest.mark.parametrize(
    ("one", "other", "expected"),
    [
        (0, 1, True),
        (1, 0, True),
        (0, 3, True),
        (4, 7, True),
        (0, 4, False),
        (0, 2, False),
        (2, 3, False),  # end of row 0 / start of row 1
        (5, 6, False),
        (4, 4, False),
    ],
)
def test_is_neighbouring(one: int, other: int, expected: bool) -> None:
    assert Board(3).is_neighbouring(one, other) is expected


# -- exchange -----------------------------------------------------------------


def test_exchange_with_blank() -> None:
    board = Board(3)
    board.exchange(7, 8)
    assert board.values == [1, 2, 3, 4, 5, 6, 7, 0, 8]


def test_exchange_two_numbers_fails() -> None:
    board = Board(3)
    with pytest.raises(CannotExchangeNoneZeroError) as exc_info:
        board.exchange(0, 1)
    assert exc_info.value.kind is ErrorKind.CANNOT_EXCHANGE_NONE_ZERO
    assert board.is_win()


def test_exchange_far_cells_fails() -> None:
    board = Board(3)
    with pytest.raises(CannotExchangeNotNeighbouringError) as exc_info:
        board.exchange(0, 4)
    assert exc_info.value.kind is ErrorKind.CANNOT_EXCHANGE_NOT_NEIGHBOURING
    # Non-adjacency wins over the values involved, blank or not.
    with pytest.raises(CannotExchangeNotNeighbouringError):
        board.exchange(0, 8)


def test_exchange_across_row_boundary_fails() -> None:
    board = Board.from_flat(3, [1, 2, 3, 0, 4, 5, 6, 7, 8])
    with pytest.raises(CannotExchangeNotNeighbouringError):
        board.exchange(2, 3)
    assert not board.move_tile_to_blank(2)


@pytest.mark.parametrize("index", range(9))
def test_exchange_with_itself_is_noop(index: int) -> None:
    board = Board(3)
    board.exchange(index, index)
    assert board.values == SOLVED_3x3


@pytest.mark.parametrize(("one", "other"), [(8, 9), (9, 8), (-1, 0), (0, 42)])
def test_exchange_out_of_range(one: int, other: int) -> None:
    board = Board(3)
    with pytest.raises(TileNotFoundError) as exc_info:
        board.exchange(one, other)
    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    assert isinstance(exc_info.value, IndexError)
    assert board.is_win()


# -- directional moves --------------------------------------------------------


@pytest.mark.parametrize(
    ("index", "direction", "expected"),
    [
        (0, Direction.TOP, None),
        (0, Direction.LEFT, None),
        (0, Direction.RIGHT, 1),
        (0, Direction.BOTTOM, 3),
        (4, Direction.TOP, 1),
        (4, Direction.LEFT, 3),
        (4, Direction.RIGHT, 5),
        (4, Direction.BOTTOM, 7),
        (8, Direction.TOP, 5),
        (8, Direction.LEFT, 7),
        (8, Direction.RIGHT, None),
        (8, Direction.BOTTOM, None),
        (2, Direction.RIGHT, None),
        (3, Direction.LEFT, None),
        (9, Direction.TOP, None),
    ],
)
def test_directional_index(index: int, direction: Direction, expected: int | None) -> None:
    assert Board(3).directional_index(index, direction) == expected


def test_move_blank() -> None:
    board = Board(3)
    assert board.move_blank(Direction.LEFT) is True
    assert board.values == [1, 2, 3, 4, 5, 6, 7, 0, 8]
    assert board.move_blank(Direction.TOP) is True
    assert board.values == [1, 2, 3, 4, 0, 6, 7, 5, 8]


@pytest.mark.parametrize("direction", [Direction.RIGHT, Direction.BOTTOM])
def test_move_blank_into_edge_is_noop(direction: Direction) -> None:
    board = Board(3)
    assert board.move_blank(direction) is True
    assert board.values == SOLVED_3x3


def test_move_blank_and_back_wins_again() -> None:
    board = Board(4)
    board.move_blank(Direction.TOP)
    assert not board.is_win()
    board.move_blank(Direction.BOTTOM)
    assert board.is_win()


def test_direction_opposite() -> None:
    for direction in Direction:
        assert direction.opposite is not direction
        assert direction.opposite.opposite is direction


# -- player moves -------------------------------------------------------------


def test_move_tile_to_blank() -> None:
    board = Board(3)
    assert board.move_tile_to_blank(5)
    assert board.values == [1, 2, 3, 4, 5, 0, 7, 8, 6]
    assert not board.move_tile_to_blank(0)
    assert not board.move_tile_to_blank(42)
    assert board.values == [1, 2, 3, 4, 5, 0, 7, 8, 6]


def test_move_tile_to_blank_by_point() -> None:
    board = Board(3)
    assert board.move_tile_to_blank_by_point(2, 1)
    assert board.values == [1, 2, 3, 4, 5, 6, 7, 0, 8]
    assert not board.move_tile_to_blank_by_point(0, 0)
    assert not board.move_tile_to_blank_by_point(5, 5)
    # (0, 5) maps to index 5 by formula but lies outside the grid.
    assert not board.move_tile_to_blank_by_point(0, 5)


def test_is_tile_correct() -> None:
    board = Board(3)
    board.move_blank(Direction.LEFT)
    assert board.is_tile_correct(0)
    assert not board.is_tile_correct(7)
    assert not board.is_tile_correct(8)


# -- corrupted boards ---------------------------------------------------------


def _board_without_blank() -> Board:
    board = Board(3)
    board._cells[8] = Tile(9)
    return board


def test_move_blank_without_blank_raises() -> None:
    board = _board_without_blank()
    with pytest.raises(ZeroNotFoundError) as exc_info:
        board.move_blank(Direction.LEFT)
    assert exc_info.value.kind is ErrorKind.ZERO_NOT_FOUND


def test_move_tile_without_blank_returns_false() -> None:
    assert not _board_without_blank().move_tile_to_blank(7)


# -- random sequences ---------------------------------------------------------


@pytest.mark.parametrize("side", [2, 3, 4])
@pytest.mark.parametrize("seed", range(5))
def test_invariants_hold_after_random_operations(side: int, seed: int) -> None:
    rng = random.Random(seed)
    board = Board(side)
    cells = side * side

    for _ in range(300):
        op = rng.randrange(3)
        if op == 0:
            try:
                board.exchange(rng.randrange(-1, cells + 1), rng.randrange(-1, cells + 1))
            except PuzzleError:
                pass
        elif op == 1:
            board.move_blank(rng.choice(list(Direction)))
        else:
            board.move_tile_to_blank(rng.randrange(cells))
        _assert_invariants(board)


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_is_tile_correct_off_the_board(index: int) -> None:
    assert Board(3).is_tile_correct(index) is False


# -- tile types ---------------------------------------------------------------


@pytest.mark.parametrize("value", [1.0, "1", True, None])
def test_tile_rejects_non_int_value(value: object) -> None:
    with pytest.raises(TypeError):
        Tile(value)  # type: ignore[arg-type]


def test_from_flat_rejects_float_tiles() -> None:
    with pytest.raises(TypeError):
        Board.from_flat(2, [1.0, 2, 3, 0])  # type: ignore[list-item]
