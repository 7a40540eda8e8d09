"""Defines what a cell on the board can hold"""

from enum import Enum, auto


class CellColor(Enum):
    NONE = auto()
    BLACK = auto()
    WHITE = auto()


PLAYER_COLORS: tuple[CellColor, ...] = (CellColor.BLACK, CellColor.WHITE)

# characters used in a board layout string (digits denote runs of empty cells)
LAYOUT_TO_COLOR: dict[str, CellColor] = {
    "b": CellColor.BLACK,
    "w": CellColor.WHITE,
}

COLOR_TO_LAYOUT: dict[CellColor, str] = {
    value: key for key, value in LAYOUT_TO_COLOR.items()
}


def opponent(color: CellColor) -> CellColor:
    if color == CellColor.NONE:
        raise ValueError("An empty cell has no opponent.")
    return CellColor.WHITE if color == CellColor.BLACK else CellColor.BLACK
