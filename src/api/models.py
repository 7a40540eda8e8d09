"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.config import DEFAULT_PLAYER_ONE_NAME, DEFAULT_PLAYER_TWO_NAME
from src.core.exceptions import InvalidLayoutError, InvalidRequestError
from src.core.shared_types import Color, Status
from src.othello.board import Board
from src.othello.square import BOARD_SIZE

PlayerName = str
Cell = tuple[int, int]


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    player_one_name: PlayerName = DEFAULT_PLAYER_ONE_NAME
    player_two_name: PlayerName = DEFAULT_PLAYER_TWO_NAME
    starting_layout: Optional[str] = None

    @field_validator(*["player_one_name", "player_two_name"])
    @classmethod
    def validate_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise InvalidRequestError("Player name cannot be empty.")
        return name

    @field_validator("starting_layout")
    @classmethod
    def validate_starting_layout(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        try:
            Board.from_layout(value)
        except InvalidLayoutError as error:
            raise InvalidRequestError(f"Invalid starting layout: {error}") from error
        return value.strip()


class MoveRequest(BaseModel):
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        if not 0 <= value < BOARD_SIZE:
            raise InvalidRequestError(
                f"Coordinate {value} is not on the board. Use 0 to {BOARD_SIZE - 1}."
            )
        return value


# --- RESPONSE MODELS ---
class PlayerResponse(BaseModel):
    name: PlayerName
    color: Color
    score: int


class GameStateResponse(BaseModel):
    layout: str
    rows: list[list[str]]
    players: list[PlayerResponse]
    color_to_move: Color
    valid_moves: list[Cell]
    status: Status
    message: str
    winner: Optional[PlayerName] = None
    ended: bool = False


class MoveResponse(BaseModel):
    accepted: bool
    outcome: str
    message: str
    captured: list[Cell]
    skipped_player: Optional[PlayerName] = None
    state: GameStateResponse
