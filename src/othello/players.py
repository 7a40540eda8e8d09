"""A player taking part in a game"""

from dataclasses import dataclass

from src.othello.pieces import CellColor


@dataclass
class Player:
    name: str
    color: CellColor
    # NOTE: cache of the number of pieces of this color on the board. The Game recomputes it after every board update.
    score: int = 0
