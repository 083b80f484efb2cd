"""Game status definitions and marks."""

from enum import Enum
from typing import Any

X_MARK = "x"
O_MARK = "o"
EMPTY = "_"

MARKS = (X_MARK, O_MARK)


class GameStatus(str, Enum):
    """Board lifecycle states."""

    X_WINS = "X_WINS"
    O_WINS = "O_WINS"
    X_TURN = "X_TURN"
    O_TURN = "O_TURN"


TERMINAL_STATUSES = (GameStatus.X_WINS, GameStatus.O_WINS)


def status_to_string(status: Any) -> str:
    """Return the display name of a status, or "UNKNOWN" for anything else."""
    if isinstance(status, GameStatus):
        return status.value
    return "UNKNOWN"


def is_terminal_status(status: GameStatus) -> bool:
    """Check if a status ends the game (no further moves are processed)."""
    return status in TERMINAL_STATUSES


def mark_for_status(status: GameStatus) -> str:
    """Mark that must be played next.

    Only X_TURN maps to "x"; every other status maps to "o".
    """
    return X_MARK if status == GameStatus.X_TURN else O_MARK
