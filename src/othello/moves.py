"""
Placement and capturing rules

Key idea: raycasting. From the cell where a piece would be placed, walk along each of the eight directions.
A run of the opponent's pieces that is closed off by one of your own pieces gets captured (flipped).

The functions here never change the board: the Game decides what to do with the results.
"""

from typing import Protocol

from src.othello.pieces import CellColor, opponent
from src.othello.square import Position


class Board(Protocol):
    """Just the parts the rules need"""

    def piece(self, position: Position) -> CellColor: ...
    def empty_squares(self) -> list[Position]: ...


Vector = tuple[int, int]

# (d_row, d_col): all eight compass directions
DIRECTIONS: tuple[Vector, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def captures_in_direction(
    board: Board, position: Position, color: CellColor, direction: Vector
) -> list[Position]:
    """
    Raycasting along a single direction
    -----

    Start one step away from `position` and keep walking while the cells hold the opponent's pieces.
    * Reached one of your own pieces? --> everything walked over gets captured.
    * Reached an empty cell or the edge of the board? --> nothing gets captured (even if the run was non-empty).
    """
    opponent_color = opponent(color)

    run: list[Position] = []
    current = position.shifted(direction)
    while current.is_within_bounds() and board.piece(current) == opponent_color:
        run.append(current)
        current = current.shifted(direction)

    if run and current.is_within_bounds() and board.piece(current) == color:
        return run
    return []


def captured_cells(board: Board, position: Position, color: CellColor) -> list[Position]:
    """
    All opponent pieces that flip when `color` places a piece on `position`.

    NOTE: must be called on the board as it was BEFORE the piece is placed.
    An empty list means the placement is not legal (this includes an occupied cell).
    """
    if board.piece(position) != CellColor.NONE:
        return []

    captured: list[Position] = []
    for direction in DIRECTIONS:
        captured.extend(captures_in_direction(board, position, color, direction))
    return captured


def is_legal_move(board: Board, position: Position, color: CellColor) -> bool:
    return len(captured_cells(board, position, color)) > 0


def legal_moves(board: Board, color: CellColor) -> list[Position]:
    """Every empty cell where placing a piece of `color` captures at least one opponent piece (row by row)."""
    return [
        position
        for position in board.empty_squares()
        if is_legal_move(board, position, color)
    ]


def has_legal_move(board: Board, color: CellColor) -> bool:
    return any(is_legal_move(board, position, color) for position in board.empty_squares())
