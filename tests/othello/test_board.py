"""Unit tests for /src/othello/board.py"""

import pytest

from src.core.exceptions import InvalidLayoutError
from src.othello.board import STARTING_LAYOUT, Board
from src.othello.pieces import CellColor
from src.othello.square import ALL_POSITIONS, Position

EMPTY_LAYOUT = "/".join(["8"] * 8)
CENTER_PIECES = {
    Position(3, 3): CellColor.WHITE,
    Position(3, 4): CellColor.BLACK,
    Position(4, 3): CellColor.BLACK,
    Position(4, 4): CellColor.WHITE,
}


def test_starting_position() -> None:
    """Exactly the four center cells are occupied"""
    board = Board.starting_position()
    for position in ALL_POSITIONS:
        assert board.piece(position) == CENTER_PIECES.get(position, CellColor.NONE)


def test_empty_board() -> None:
    board = Board.empty()
    assert board.count_pieces() == {
        CellColor.NONE: 64,
        CellColor.BLACK: 0,
        CellColor.WHITE: 0,
    }
    assert board.to_layout() == EMPTY_LAYOUT


def test_from_layout() -> None:
    board = Board.from_layout("bw6/8/8/8/8/8/8/7b")
    assert board.piece(Position(0, 0)) == CellColor.BLACK
    assert board.piece(Position(0, 1)) == CellColor.WHITE
    assert board.piece(Position(0, 2)) == CellColor.NONE
    assert board.piece(Position(7, 7)) == CellColor.BLACK
    assert board.count_pieces()[CellColor.NONE] == 61


def test_layout_is_case_insensitive() -> None:
    assert Board.from_layout("BW6/8/8/8/8/8/8/8") == Board.from_layout(
        "bw6/8/8/8/8/8/8/8"
    )


@pytest.mark.parametrize(
    "layout",
    [STARTING_LAYOUT, EMPTY_LAYOUT, "bwbwbwbw/8/1b1w4/8/8/8/8/wwwwwwww"],
)
def test_to_layout(layout: str) -> None:
    assert Board.from_layout(layout).to_layout() == layout


@pytest.mark.parametrize(
    "layout",
    [
        "8/8/8/8/8/8/8",  # only 7 rows
        "8/8/8/8/8/8/8/8/8",  # 9 rows
        "7/8/8/8/8/8/8/8",  # a row that is too short
        "bw7/8/8/8/8/8/8/8",  # a row that is too long
        "x7/8/8/8/8/8/8/8",  # unknown piece
        "08/8/8/8/8/8/8/8",  # zero is not a run of empty cells
        "²7/8/8/8/8/8/8/8",  # only ASCII digits count as empty runs
        "",
    ],
)
def test_invalid_layout(layout: str) -> None:
    with pytest.raises(InvalidLayoutError):
        Board.from_layout(layout)


def test_place_piece() -> None:
    board = Board.starting_position()
    board.place_piece(CellColor.BLACK, Position(3, 3))
    assert board.piece(Position(3, 3)) == CellColor.BLACK


def test_locate_color() -> None:
    board = Board.starting_position()
    assert board.locate_color(CellColor.BLACK) == [Position(3, 4), Position(4, 3)]
    assert board.locate_color(CellColor.WHITE) == [Position(3, 3), Position(4, 4)]


def test_empty_squares() -> None:
    board = Board.starting_position()
    empty_squares = board.empty_squares()
    assert len(empty_squares) == 60
    assert not set(CENTER_PIECES) & set(empty_squares)


def test_counts_add_up_to_64() -> None:
    board = Board.from_layout("bwbwbwbw/8/1b1w4/8/8/8/8/wwwwwwww")
    counts = board.count_pieces()
    assert counts[CellColor.BLACK] == 5
    assert counts[CellColor.WHITE] == 13
    assert sum(counts.values()) == 64


def test_reset() -> None:
    board = Board.from_layout("bwbwbwbw/8/1b1w4/8/8/8/8/wwwwwwww")
    board.reset()
    assert board == Board.starting_position()


def test_reset_twice() -> None:
    board = Board.starting_position()
    board.place_piece(CellColor.WHITE, Position(0, 0))
    board.reset()
    once = board.to_layout()
    board.reset()
    assert board.to_layout() == once == STARTING_LAYOUT


def test_rows_are_a_copy() -> None:
    """A renderer gets the cells, but can never write to the board through them."""
    board = Board.starting_position()
    rows = board.rows()
    assert rows[3][3] == CellColor.WHITE
    assert isinstance(rows, tuple) and all(isinstance(row, tuple) for row in rows)
    board.place_piece(CellColor.BLACK, Position(3, 3))
    assert rows[3][3] == CellColor.WHITE
