"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The domain layer hands out a GameModel, the Service turns it into API responses.
(Decouples the data model of the domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PieceColor = str
CellState = str  # a PieceColor, or "none" for an empty cell
PlayerName = str
Cell = tuple[int, int]


@dataclass
class GameModel:
    """Transport-safe representation of an Othello game: only plain values, no domain objects."""

    layout: str
    rows: list[list[CellState]]
    valid_moves: list[Cell]
    registered_players: dict[PieceColor, PlayerName]
    scores: dict[PieceColor, int]
    color_to_move: PieceColor
    status: str
    message: str
    winner: Optional[PlayerName] = None
    ended: bool = False
