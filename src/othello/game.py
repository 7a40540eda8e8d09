"""
The Game class will be the entrypoint into the domain layer for the service layer (or any other caller, like a GUI).
It owns the board, keeps track of whose turn it is and applies the rules from moves.py -->
hands back snapshots of the state, and notifies observers in-line while it updates.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Protocol, Self

from src.core.exceptions import (
    GameConfigurationError,
    GameStateError,
    InvalidPositionError,
)
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.othello.board import Board
from src.othello.moves import captured_cells, has_legal_move, legal_moves
from src.othello.pieces import PLAYER_COLORS, CellColor, opponent
from src.othello.players import Player
from src.othello.square import BOARD_SIZE, Position

logger = logging.getLogger(__name__)

READY_MESSAGE = "Ready to start."
RESET_MESSAGE = "Game reset. Ready to start."
NOT_ACTIVE_MESSAGE = "Game not started or already ended"


class MoveOutcome(Enum):
    ACCEPTED = auto()
    GAME_ENDED = auto()
    GAME_NOT_ACTIVE = auto()
    ILLEGAL_POSITION = auto()


@dataclass(frozen=True)
class GameSummary:
    """Final result of a game: both names and both scores, so a caller can render the full summary."""

    players: Mapping[CellColor, str]  # read-only views
    final_scores: Mapping[CellColor, int]
    winner_color: Optional[CellColor]  # None on a tie
    message: str

    @property
    def is_tie(self) -> bool:
        return self.winner_color is None

    @property
    def winner(self) -> Optional[str]:
        if self.winner_color is None:
            return None
        return self.players[self.winner_color]


@dataclass(frozen=True)
class GameSnapshot:
    """Everything a renderer needs, decoupled from the live Game (changing the game does not change the snapshot)."""

    board: tuple[tuple[CellColor, ...], ...]
    valid_moves: tuple[Position, ...]
    players: tuple[Player, ...]
    color_to_move: CellColor
    status: Status
    message: str
    summary: Optional[GameSummary] = None

    @property
    def current_player(self) -> Player:
        return next(
            player for player in self.players if player.color == self.color_to_move
        )

    @property
    def scores(self) -> dict[CellColor, int]:
        return {player.color: player.score for player in self.players}

    def to_model(self) -> GameModel:
        """Encode into a format the Service layer uses"""
        return GameModel(
            layout=Board([list(row) for row in self.board]).to_layout(),
            rows=[[cell.name.lower() for cell in row] for row in self.board],
            valid_moves=[(position.row, position.col) for position in self.valid_moves],
            registered_players={
                Color[player.color.name]: player.name for player in self.players
            },
            scores={Color[player.color.name]: player.score for player in self.players},
            color_to_move=Color[self.color_to_move.name],
            status=self.status,
            message=self.message,
            winner=self.summary.winner if self.summary else None,
            ended=self.status == Status.ENDED,
        )


@dataclass(frozen=True)
class MoveResult:
    """Response to a move attempt. A rejected attempt leaves the game untouched."""

    outcome: MoveOutcome
    message: str
    snapshot: GameSnapshot
    captured: tuple[Position, ...] = ()
    skipped_player: Optional[str] = None

    @property
    def is_valid_move(self) -> bool:
        return self.outcome in (MoveOutcome.ACCEPTED, MoveOutcome.GAME_ENDED)


class GameObserver(Protocol):
    """Change notifications. Called synchronously, before the mutating call on the Game returns."""

    def on_turn_changed(self, message: str) -> None: ...
    def on_board_changed(self) -> None: ...
    def on_moves_changed(self, positions: list[Position]) -> None: ...
    def on_message_changed(self, message: str) -> None: ...
    def on_game_ended(self, summary: GameSummary) -> None: ...


def _validate_players(players: list[Player]) -> None:
    """Exactly one black and one white player. Anything else is refused (never silently fixed)."""
    colors = [player.color for player in players]
    if len(players) != 2 or set(colors) != set(PLAYER_COLORS):
        raise GameConfigurationError(
            f"A game needs one black and one white player. Got colors: {', '.join(color.name.lower() for color in colors)}"
        )


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: dict[CellColor, Player]  # insertion order: player one first
    color_to_move: CellColor = CellColor.BLACK
    valid_moves: list[Position] = field(default_factory=list)
    status: Status = Status.NOT_STARTED
    message: str = READY_MESSAGE
    summary: Optional[GameSummary] = None
    observers: list[GameObserver] = field(default_factory=list, repr=False)
    _updating: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        _validate_players(list(self.players.values()))
        for color, player in self.players.items():
            if player.color != color:
                raise GameConfigurationError(
                    f"Player {player.name!r} plays {player.color.name.lower()}, but is registered as {color.name.lower()}."
                )
        self._update_scores()

    @classmethod
    def new_game(
        cls, player_one: str, player_two: str, board: Optional[Board] = None
    ) -> Self:
        """Player one gets the black pieces (and therefore moves first), player two the white pieces."""
        return cls.from_players(
            Player(player_one, CellColor.BLACK),
            Player(player_two, CellColor.WHITE),
            board,
        )

    @classmethod
    def from_players(
        cls, player_one: Player, player_two: Player, board: Optional[Board] = None
    ) -> Self:
        # validate before building the dict: two players with the same color would silently collapse into one entry
        _validate_players([player_one, player_two])
        return cls(
            board=board if board is not None else Board.starting_position(),
            players={player_one.color: player_one, player_two.color: player_two},
        )

    def subscribe(self, observer: GameObserver) -> None:
        self.observers.append(observer)

    def unsubscribe(self, observer: GameObserver) -> None:
        self.observers.remove(observer)

    def start(self) -> GameSnapshot:
        """
        Black moves first.

        NOTE: calling this on a game in progress just recomputes the same state.
        A finished game has to be reset first.
        """
        if self.status == Status.ENDED:
            raise GameStateError(
                "Game has already ended. Reset the game before starting again."
            )

        with self._update():
            self._change_status(Status.IN_PROGRESS)
            self._update_scores()
            logger.info(
                "Game started: %s (black) vs %s (white)",
                self.players[CellColor.BLACK].name,
                self.players[CellColor.WHITE].name,
            )

            # a custom starting board might leave black without a move (or nobody, which ends the game at once)
            skipped = self._settle_turn()
            if self.status == Status.IN_PROGRESS:
                self._announce_turn(skipped, opening=True)
        return self.snapshot()

    def attempt_move(self, row: int, col: int) -> MoveResult:
        """
        Attempt to place a piece for the player whose turn it is
        -----

        1. reject if the game is not running, or the position is not in the set of valid moves
        2. place the piece and flip the captured pieces
        3. update the scores
        4. game over? (neither color can move)
        5. pass the turn (skipping the opponent if they cannot move)
        """
        position = self._checked_position(row, col)
        with self._update():
            if self.status != Status.IN_PROGRESS:
                logger.debug("Rejected move at %s: game is %s", position, self.status)
                return self._rejected(MoveOutcome.GAME_NOT_ACTIVE, NOT_ACTIVE_MESSAGE)

            if position not in self.valid_moves:
                logger.debug(
                    "Rejected move at %s for %s: not a valid move",
                    position,
                    self.current_player.name,
                )
                return self._rejected(
                    MoveOutcome.ILLEGAL_POSITION,
                    f"Invalid move! Position ({row},{col}) is not valid.",
                )

            mover = self.current_player
            captured = self._apply_move(position, mover.color)
            logger.debug(
                "%s placed at %s and captured %d piece(s)",
                mover.name,
                position,
                len(captured),
            )

            if self._is_game_over():
                self._end_game()
                return MoveResult(
                    MoveOutcome.GAME_ENDED, self.message, self.snapshot(), tuple(captured)
                )

            skipped = self._pass_turn()
            skipped_name = skipped.name if skipped else None
            if self.status == Status.ENDED:
                return MoveResult(
                    MoveOutcome.GAME_ENDED,
                    self.message,
                    self.snapshot(),
                    tuple(captured),
                    skipped_name,
                )

            self._announce_turn(skipped)
            return MoveResult(
                MoveOutcome.ACCEPTED,
                self.message,
                self.snapshot(),
                tuple(captured),
                skipped_name,
            )

    def reset(self) -> GameSnapshot:
        """Back to the starting layout, waiting for `start`. Resetting twice is the same as resetting once."""
        with self._update():
            self.board.reset()
            self._update_scores()
            self.color_to_move = CellColor.BLACK
            self.summary = None
            self._change_status(Status.NOT_STARTED)
            self._notify("on_board_changed")
            self._set_valid_moves([])
            self._set_message(RESET_MESSAGE)
            logger.info("Game reset")
        return self.snapshot()

    # --- QUERIES ---
    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self.board.rows(),
            valid_moves=tuple(self.valid_moves),
            players=tuple(replace(player) for player in self.players.values()),
            color_to_move=self.color_to_move,
            status=self.status,
            message=self.message,
            summary=self.summary,
        )

    def to_model(self) -> GameModel:
        return self.snapshot().to_model()

    def piece_color_at(self, row: int, col: int) -> CellColor:
        return self.board.piece(self._checked_position(row, col))

    def is_legal_move(self, row: int, col: int) -> bool:
        """Is the cell in the current set of valid moves? (used to highlight cells)"""
        return self._checked_position(row, col) in self.valid_moves

    def current_player_color(self) -> CellColor:
        return self.color_to_move

    @property
    def current_player(self) -> Player:
        return self.players[self.color_to_move]

    @property
    def player_one(self) -> Player:
        return list(self.players.values())[0]

    @property
    def player_two(self) -> Player:
        return list(self.players.values())[1]

    def scores(self) -> dict[CellColor, int]:
        return {color: player.score for color, player in self.players.items()}

    def is_started(self) -> bool:
        return self.status != Status.NOT_STARTED

    def is_ended(self) -> bool:
        return self.status == Status.ENDED

    # -- PRIVATE HELPERS ---
    @contextmanager
    def _update(self) -> Iterator[None]:
        """
        Only one mutating call at a time: observers must not call back into the game while it updates.
        An update that fails halfway (e.g. an observer raising) leaves the game as it was before the call.
        """
        if self._updating:
            raise GameStateError(
                "Cannot change the game while it is still processing another update."
            )
        before = self.snapshot()
        self._updating = True
        try:
            yield
        except Exception:
            self._restore(before)
            raise
        finally:
            self._updating = False

    def _restore(self, snapshot: GameSnapshot) -> None:
        """Roll back to an earlier snapshot (observers are not notified)."""
        logger.warning("Update failed, rolling back to the previous state")
        self.board.grid = [list(row) for row in snapshot.board]
        self.color_to_move = snapshot.color_to_move
        self.valid_moves = list(snapshot.valid_moves)
        self.status = snapshot.status
        self.message = snapshot.message
        self.summary = snapshot.summary
        self._update_scores()

    def _checked_position(self, row: int, col: int) -> Position:
        position = Position(row, col)
        if not position.is_within_bounds():
            raise InvalidPositionError(
                f"Position ({row},{col}) is not on the board. Rows and columns run from 0 to {BOARD_SIZE - 1}."
            )
        return position

    def _rejected(self, outcome: MoveOutcome, reason: str) -> MoveResult:
        return MoveResult(outcome, reason, self.snapshot())

    def _apply_move(self, position: Position, color: CellColor) -> list[Position]:
        """Place the piece and flip the captured pieces. NOTE the captures are determined BEFORE the piece is placed."""
        captured = captured_cells(self.board, position, color)
        self.board.place_piece(color, position)
        for cell in captured:
            self.board.place_piece(color, cell)
        self._update_scores()
        self._notify("on_board_changed")
        return captured

    def _update_scores(self) -> None:
        counts = self.board.count_pieces()
        for color, player in self.players.items():
            player.score = counts[color]

    def _update_valid_moves(self) -> None:
        self._set_valid_moves(legal_moves(self.board, self.color_to_move))

    def _switch_turn(self) -> None:
        self.color_to_move = opponent(self.color_to_move)

    def _pass_turn(self) -> Optional[Player]:
        """Hand the turn to the opponent. Returns the player whose turn got skipped (if any)."""
        self._switch_turn()
        return self._settle_turn()

    def _settle_turn(self) -> Optional[Player]:
        """
        Make sure the player to move can actually move
        ----

        1. Player to move has valid moves? Nothing to do.
        2. No? Skip their turn: the opponent moves again.
        3. Opponent cannot move either? The game is over.

        NOTE: there is no third attempt. After two failed attempts both colors are stuck.
        """
        self._update_valid_moves()
        if self.valid_moves:
            return None

        skipped = self.current_player
        logger.debug("No valid moves for %s, skipping turn", skipped.name)
        self._switch_turn()
        self._update_valid_moves()
        if not self.valid_moves:
            self._end_game()
        return skipped

    def _announce_turn(self, skipped: Optional[Player], opening: bool = False) -> None:
        player = self.current_player
        turn_message = f"{player.name}'s turn"
        if skipped is not None:
            self._set_message(
                f"No valid moves for {skipped.name}. Skipping turn. {turn_message}"
            )
        elif opening:
            self._set_message(f"Game started! {turn_message}")
        else:
            self._set_message(turn_message)
        self._notify("on_turn_changed", f"{turn_message} ({player.color.name.lower()})")

    # --- CHECKS FOR ENDING THE GAME ---
    def _is_game_over(self) -> bool:
        """Over when neither color has a valid move (not just the player to move)."""
        return not any(has_legal_move(self.board, color) for color in PLAYER_COLORS)

    def _end_game(self) -> None:
        self._change_status(Status.ENDED)
        self._update_scores()
        self._set_valid_moves([])

        self.summary = self._determine_winner()
        if self.summary.is_tie:
            self._set_message("It's a TIE!")
        else:
            self._set_message(f"WINNER: {self.summary.winner}!")
        logger.info(self.summary.message)
        self._notify("on_game_ended", self.summary)

    def _determine_winner(self) -> GameSummary:
        """Most pieces on the board wins. Equal counts is a tie."""
        names = MappingProxyType(
            {color: player.name for color, player in self.players.items()}
        )
        final_scores = MappingProxyType(self.scores())
        winner, loser = sorted(
            self.players.values(), key=lambda player: player.score, reverse=True
        )

        if winner.score == loser.score:
            return GameSummary(
                players=names,
                final_scores=final_scores,
                winner_color=None,
                message=f"Game ended in a tie! Both players have {winner.score} pieces.",
            )
        return GameSummary(
            players=names,
            final_scores=final_scores,
            winner_color=winner.color,
            message=(
                f"Game Over! Winner: {winner.name} with {winner.score} pieces! "
                f"Final Score: {winner.name} {winner.score} - {loser.score} {loser.name}"
            ),
        )

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status

    # --- NOTIFICATIONS ---
    def _set_message(self, message: str) -> None:
        self.message = message
        self._notify("on_message_changed", message)

    def _set_valid_moves(self, moves: list[Position]) -> None:
        self.valid_moves = moves
        self._notify("on_moves_changed", list(moves))

    def _notify(self, event: str, *args: object) -> None:
        for observer in list(self.observers):
            getattr(observer, event)(*args)
