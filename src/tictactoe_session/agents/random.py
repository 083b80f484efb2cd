"""Random agent that plays uniformly at random among available actions."""

from typing import Optional

import numpy as np

from tictactoe_session.action import Action
from tictactoe_session.board import TicTacToeBoard


class RandomAvailableAgent:
    """Agent that selects uniformly at random from available actions."""

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the random agent.

        Args:
            seed: Random seed for reproducibility (optional)
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def get_action(self, board: TicTacToeBoard) -> Optional[Action]:
        """
        Select a random available action.

        Args:
            board: Board to inspect

        Returns:
            Randomly selected action, or None when no action is available
        """
        actions = board.get_available_actions()
        if not actions:
            return None
        return actions[int(self.rng.integers(len(actions)))]

    def reset(self) -> None:
        """Reset agent state (no-op; the random stream carries on across games)."""
        pass
