"""Orchestration of communication from a presentation layer to the game logic (and the reverse direction)."""

import logging
from threading import RLock
from typing import Optional

from src.api.models import (
    CreateGameRequest,
    GameStateResponse,
    MoveRequest,
    MoveResponse,
    PlayerResponse,
)
from src.core.exceptions import GameStateError
from src.core.models import GameModel
from src.othello.board import Board
from src.othello.game import Game, GameObserver

logger = logging.getLogger(__name__)


class OthelloService:
    """
    Hosts a single game of Othello.

    Every call goes through one lock, so a multi-threaded host (GUI thread + workers, web server, ...)
    cannot interleave two updates of the same game. The lock is re-entrant: an observer that calls back into
    the service while the game is updating gets a GameStateError from the game instead of a deadlock.
    """

    def __init__(self) -> None:
        self.game: Optional[Game] = None
        self._lock = RLock()

    # -- Presentation layer logic ---
    def create_game(self, request: CreateGameRequest) -> GameStateResponse:
        """Replace any previous game with a new one (not started yet)."""
        board = (
            Board.from_layout(request.starting_layout)
            if request.starting_layout
            else None
        )
        with self._lock:
            self.game = Game.new_game(
                request.player_one_name, request.player_two_name, board
            )
            logger.info(
                "Created game: %s vs %s",
                request.player_one_name,
                request.player_two_name,
            )
            return self._create_state_response(self.game.to_model())

    def start_game(self) -> GameStateResponse:
        with self._lock:
            game = self._fetch_game()
            snapshot = game.start()
            return self._create_state_response(snapshot.to_model())

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt for the player whose turn it is."""
        with self._lock:
            game = self._fetch_game()
            result = game.attempt_move(request.row, request.col)
            return MoveResponse(
                accepted=result.is_valid_move,
                outcome=result.outcome.name.lower(),
                message=result.message,
                captured=[(position.row, position.col) for position in result.captured],
                skipped_player=result.skipped_player,
                state=self._create_state_response(result.snapshot.to_model()),
            )

    def reset_game(self) -> GameStateResponse:
        with self._lock:
            game = self._fetch_game()
            snapshot = game.reset()
            return self._create_state_response(snapshot.to_model())

    def get_game_state(self) -> GameStateResponse:
        """
        Retrieve current game state.
        ----
        Used by a presentation layer that polls instead of subscribing to notifications.
        """
        with self._lock:
            game = self._fetch_game()
            return self._create_state_response(game.to_model())

    def subscribe(self, observer: GameObserver) -> None:
        """NOTE: observers belong to the current game. Creating a new game drops them."""
        with self._lock:
            self._fetch_game().subscribe(observer)

    # -- Internal helpers --
    def _create_state_response(self, model: GameModel) -> GameStateResponse:
        """Convert info in GameModel to a GameStateResponse"""
        return GameStateResponse(
            layout=model.layout,
            rows=model.rows,
            players=[
                PlayerResponse(name=name, color=color, score=model.scores[color])
                for color, name in model.registered_players.items()
            ],
            color_to_move=model.color_to_move,
            valid_moves=model.valid_moves,
            status=model.status,
            message=model.message,
            winner=model.winner,
            ended=model.ended,
        )

    def _fetch_game(self) -> Game:
        """There has to be a game before it can be played."""
        if self.game is None:
            raise GameStateError("No game has been created yet.")
        return self.game
