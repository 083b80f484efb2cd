"""Proposed board moves."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Action:
    """
    A proposed mark placement.

    An action is not validated on construction: it only changes the board
    once TicTacToeBoard.apply_action accepts it.

    Attributes:
        row_index: Zero-based row
        column_index: Zero-based column
        mark: "x" or "o" for a real move
    """

    row_index: int
    column_index: int
    mark: str

    def __str__(self) -> str:
        return action_to_string(self)


def action_to_string(action: Action) -> str:
    """Render an action as "{row, column, mark}"."""
    return f"{{{action.row_index}, {action.column_index}, {action.mark}}}"


# Placeholder returned by agents that follow the in-band "no move" convention.
# Its mark never matches a turn, so the board always rejects it.
NO_MOVE = Action(0, 0, "?")
