"""The Game board stores the cells. It knows nothing about the rules: those live in moves.py"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidLayoutError
from src.othello.pieces import COLOR_TO_LAYOUT, LAYOUT_TO_COLOR, CellColor
from src.othello.square import ALL_POSITIONS, BOARD_SIZE, Position

STARTING_LAYOUT = "8/8/8/3wb3/3bw3/8/8/8"
EMPTY_RUN_CHARACTERS = "12345678"

Grid = list[list[CellColor]]


@dataclass
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls([[CellColor.NONE] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def starting_position(cls) -> Self:
        """Four pieces in the center: (3,3) and (4,4) white, (3,4) and (4,3) black."""
        return cls.from_layout(STARTING_LAYOUT)

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from a layout string.

        Works like the board part of a FEN string in chess:
        8/8/8/3wb3/3bw3/8/8/8
        means:
        * rows are separated by slashes, the top row (row 0) comes first
        * within a row, cells are read left to right (col 0 first)
        * 'b' is a black piece, 'w' a white piece
        * a digit denotes that many empty cells after each other
        """
        rows = layout.strip().split("/")
        if len(rows) != BOARD_SIZE:
            raise InvalidLayoutError(
                f"Layout must contain {BOARD_SIZE} rows separated by '/', got {len(rows)}: {layout!r}"
            )

        grid: Grid = []
        for row_idx, row_layout in enumerate(rows):
            row: list[CellColor] = []
            for character in row_layout:
                if character.lower() in LAYOUT_TO_COLOR:
                    row.append(LAYOUT_TO_COLOR[character.lower()])
                elif character in EMPTY_RUN_CHARACTERS:
                    row.extend([CellColor.NONE] * int(character))
                else:
                    raise InvalidLayoutError(
                        f"Unexpected character {character!r} in row {row_idx} of layout {layout!r}"
                    )
            if len(row) != BOARD_SIZE:
                raise InvalidLayoutError(
                    f"Row {row_idx} of layout {layout!r} describes {len(row)} cells instead of {BOARD_SIZE}"
                )
            grid.append(row)
        return cls(grid)

    def to_layout(self) -> str:
        """Rows are separated by slashes in the layout string."""
        return "/".join(self._row_to_layout(row) for row in self.grid)

    def _row_to_layout(self, row: list[CellColor]) -> str:
        """Layout string of a single row"""
        characters: list[str] = []
        empty_count = 0
        for color in row:
            if color == CellColor.NONE:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(COLOR_TO_LAYOUT[color])

        # an entirely empty row still gets its number
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def reset(self) -> None:
        """Back to the four-piece starting layout."""
        self.grid = Board.starting_position().grid

    def piece(self, position: Position) -> CellColor:
        return self.grid[position.row][position.col]

    def place_piece(self, color: CellColor, position: Position) -> None:
        """Overwrites whatever was on the cell. NOTE: Does not check the rules, nor the bounds."""
        self.grid[position.row][position.col] = color

    def locate_color(self, color: CellColor) -> list[Position]:
        return [position for position in ALL_POSITIONS if self.piece(position) == color]

    def empty_squares(self) -> list[Position]:
        return self.locate_color(CellColor.NONE)

    def count_pieces(self) -> dict[CellColor, int]:
        """Tally every cell state (including empty cells). The counts always add up to 64."""
        counts = {color: 0 for color in CellColor}
        for row in self.grid:
            for color in row:
                counts[color] += 1
        return counts

    def rows(self) -> tuple[tuple[CellColor, ...], ...]:
        """Read-only copy of the grid (for renderers)"""
        return tuple(tuple(row) for row in self.grid)
