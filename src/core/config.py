"""Settings read from the environment (once, at import time)."""

import os

DEFAULT_PLAYER_ONE_NAME = os.getenv("OTHELLO_PLAYER_ONE_NAME", "Player 1")
DEFAULT_PLAYER_TWO_NAME = os.getenv("OTHELLO_PLAYER_TWO_NAME", "Player 2")
