"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable
from unittest.mock import Mock

import pytest

from src.othello.board import Board
from src.othello.game import Game

PLAYER_ONE = "Ada"
PLAYER_TWO = "Grace"


@pytest.fixture
def new_game() -> Game:
    """Standard starting position, not started yet. Ada plays black, Grace plays white."""
    return Game.new_game(PLAYER_ONE, PLAYER_TWO)


@pytest.fixture
def started_game(new_game: Game) -> Game:
    new_game.start()
    return new_game


@pytest.fixture
def game_from_layout() -> Callable[[str], Game]:
    """Call the inner function with a layout string to get a started game on that board"""

    def _create_game(layout: str) -> Game:
        game = Game.new_game(PLAYER_ONE, PLAYER_TWO, Board.from_layout(layout))
        game.start()
        return game

    return _create_game


@pytest.fixture
def observer() -> Mock:
    """Records every notification (a Mock accepts any of the GameObserver methods)."""
    return Mock()
