"""Custom exceptions. Every layer raises (a subclass of) GameError so callers can catch the whole family at once."""


class GameError(Exception):
    """Base class for anything that goes wrong while playing a game of Othello."""


class GameStateError(GameError):
    """Operation is not allowed in the current state of the game."""


class GameConfigurationError(GameError):
    """Game cannot be constructed with the given players / colors."""


class InvalidPositionError(GameError):
    """Coordinates do not refer to a cell on the board."""


class InvalidLayoutError(GameError):
    """Board layout string cannot be parsed."""


class InvalidRequestError(GameError):
    """Request data did not pass validation."""
