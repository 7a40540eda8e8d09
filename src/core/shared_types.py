"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    NOT_STARTED = "not started"
    IN_PROGRESS = "in progress"
    ENDED = "ended"


# --- NOTE: Color here has no option for an empty cell. The domain layer uses CellColor (src/othello/pieces.py), which does.
class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"
