"""Base protocol for Tic-Tac-Toe agents."""

from typing import TYPE_CHECKING, Optional, Protocol

from tictactoe_session.action import Action

if TYPE_CHECKING:
    from tictactoe_session.board import TicTacToeBoard


class Agent(Protocol):
    """Protocol for Tic-Tac-Toe agents."""

    def get_action(self, board: "TicTacToeBoard") -> Optional[Action]:
        """
        Propose an action for the player on turn.

        The board is only read; the caller decides whether to apply the
        returned action.

        Args:
            board: Board to inspect for this call

        Returns:
            Proposed action, or None if no legal move exists
        """
        ...

    def reset(self) -> None:
        """
        Reset agent state (if any) at the start of a new game.

        Optional for stateless agents.
        """
        ...
