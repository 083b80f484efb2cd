"""Tests for status helpers and actions."""

import pytest

from tictactoe_session.action import NO_MOVE, Action, action_to_string
from tictactoe_session.status import (
    GameStatus,
    is_terminal_status,
    mark_for_status,
    status_to_string,
)


class TestStatusToString:
    """Test status display names."""

    @pytest.mark.parametrize(
        "status, expected",
        [
            (GameStatus.X_WINS, "X_WINS"),
            (GameStatus.O_WINS, "O_WINS"),
            (GameStatus.X_TURN, "X_TURN"),
            (GameStatus.O_TURN, "O_TURN"),
        ],
    )
    def test_known_statuses(self, status: GameStatus, expected: str) -> None:
        """Test that every status renders as its name."""
        assert status_to_string(status) == expected

    @pytest.mark.parametrize("value", [None, 4, "DRAW", "X_TURN"])
    def test_unknown_value(self, value) -> None:
        """Test the fallback for values outside the enumeration."""
        assert status_to_string(value) == "UNKNOWN"


class TestStatusHelpers:
    """Test terminal and turn-mark helpers."""

    def test_terminal_statuses(self) -> None:
        """Only wins are terminal."""
        assert is_terminal_status(GameStatus.X_WINS)
        assert is_terminal_status(GameStatus.O_WINS)
        assert not is_terminal_status(GameStatus.X_TURN)
        assert not is_terminal_status(GameStatus.O_TURN)

    def test_mark_for_status(self) -> None:
        """X_TURN requires 'x'; O_TURN requires 'o'."""
        assert mark_for_status(GameStatus.X_TURN) == "x"
        assert mark_for_status(GameStatus.O_TURN) == "o"


class TestAction:
    """Test action values."""

    def test_to_string(self) -> None:
        """Test the "{row, column, mark}" rendering."""
        assert action_to_string(Action(1, 2, "o")) == "{1, 2, o}"
        assert str(Action(0, 0, "x")) == "{0, 0, x}"

    def test_no_move_placeholder(self) -> None:
        """Test the in-band no-move action."""
        assert NO_MOVE == Action(0, 0, "?")
        assert str(NO_MOVE) == "{0, 0, ?}"

    def test_actions_are_immutable(self) -> None:
        """Test that actions cannot be changed after creation."""
        action = Action(0, 0, "x")
        with pytest.raises(AttributeError):
            action.mark = "o"  # type: ignore[misc]
