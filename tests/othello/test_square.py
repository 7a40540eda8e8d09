"""Unit tests for /src/othello/square.py"""

import pytest

from src.othello.square import ALL_POSITIONS, BOARD_SIZE, Position


def test_position_within_bounds() -> None:
    """happy case: every cell of the 8x8 board"""
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            assert Position(row, col).is_within_bounds()


@pytest.mark.parametrize(
    "row, col",
    [(-1, 0), (0, -1), (BOARD_SIZE, 0), (0, BOARD_SIZE), (-1, BOARD_SIZE)],
)
def test_position_out_of_bounds(row: int, col: int) -> None:
    assert not Position(row, col).is_within_bounds()


def test_positions_are_values() -> None:
    """Equal coordinates --> equal positions, so they can be looked up in lists / sets of moves."""
    assert Position(2, 3) == Position(2, 3)
    assert Position(2, 3) != Position(3, 2)
    assert Position(2, 3) in {Position(2, 3)}


@pytest.mark.parametrize(
    "vector, expected",
    [((-1, -1), Position(2, 2)), ((0, 1), Position(3, 4)), ((1, 0), Position(4, 3))],
)
def test_shifted(vector: tuple[int, int], expected: Position) -> None:
    assert Position(3, 3).shifted(vector) == expected


def test_shifted_can_leave_the_board() -> None:
    assert not Position(0, 0).shifted((-1, 0)).is_within_bounds()


def test_all_positions_row_by_row() -> None:
    assert len(ALL_POSITIONS) == BOARD_SIZE * BOARD_SIZE
    assert ALL_POSITIONS[0] == Position(0, 0)
    assert ALL_POSITIONS[1] == Position(0, 1)
    assert ALL_POSITIONS[-1] == Position(7, 7)
