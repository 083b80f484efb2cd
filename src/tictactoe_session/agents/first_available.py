"""Agent that always plays the first empty cell."""

from typing import Optional

from tictactoe_session.action import Action
from tictactoe_session.board import TicTacToeBoard


class FirstAvailableAgent:
    """Agent that picks the first available action in row-major order."""

    def get_action(self, board: TicTacToeBoard) -> Optional[Action]:
        """
        Select the first available action.

        Args:
            board: Board to inspect

        Returns:
            First entry of board.get_available_actions(), or None when the
            list is empty
        """
        actions = board.get_available_actions()
        if actions:
            return actions[0]
        return None

    def reset(self) -> None:
        """Reset agent state (no-op for stateless agent)."""
        pass
