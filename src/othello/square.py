"""
A single cell (position) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Othello is always played on an 8x8 board.
BOARD_SIZE = 8


@dataclass(frozen=True)
class Position:
    """Zero-based (row, col). Row 0 is the top row, col 0 the left-most column."""

    row: int
    col: int

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def shifted(self, vector: tuple[int, int]) -> Position:
        """One step along the given direction. NOTE: the result may fall off the board."""
        d_row, d_col = vector
        return Position(self.row + d_row, self.col + d_col)


ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
