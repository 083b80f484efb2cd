"""Tests for agent implementations."""

import numpy as np
import pytest

from tictactoe_session.action import Action
from tictactoe_session.agents import (
    FirstAvailableAgent,
    RandomAvailableAgent,
    create_agent,
)
from tictactoe_session.board import TicTacToeBoard
from tictactoe_session.exceptions import ConfigurationError
from tictactoe_session.status import GameStatus


class TestFirstAvailableAgent:
    """Test FirstAvailableAgent."""

    def test_empty_board(self, board: TicTacToeBoard) -> None:
        """Test that X opens in the top-left corner."""
        agent = FirstAvailableAgent()
        assert agent.get_action(board) == Action(0, 0, "x")

    def test_skips_occupied_cells(self, board: TicTacToeBoard) -> None:
        """Test that O answers in the next free cell."""
        agent = FirstAvailableAgent()
        board.apply_action(agent.get_action(board))

        assert board.get_game_status() == GameStatus.O_TURN
        assert agent.get_action(board) == Action(0, 1, "o")

    def test_returns_none_on_full_board(self, drawn_board: TicTacToeBoard) -> None:
        """Test that a full board yields no move."""
        assert FirstAvailableAgent().get_action(drawn_board) is None

    def test_returns_none_after_win(self) -> None:
        """Test that a finished game yields no move."""
        board = TicTacToeBoard.from_string("xxx" "oo_" "___", x_turn=False)
        assert board.game_over()
        assert FirstAvailableAgent().get_action(board) is None

    def test_does_not_mutate_board(self, board: TicTacToeBoard) -> None:
        """Test that proposing an action leaves the board unchanged."""
        FirstAvailableAgent().get_action(board)
        assert np.all(board.get_board_state() == "_")
        assert board.history == []

    def test_row_major_fill(self, board: TicTacToeBoard) -> None:
        """Test alternating first-available play from an empty board.

        Row-major filling gives x o x / o x o / x, which completes the
        anti-diagonal for X on the seventh move.
        """
        agent = FirstAvailableAgent()
        expected = [
            Action(0, 0, "x"),
            Action(0, 1, "o"),
            Action(0, 2, "x"),
            Action(1, 0, "o"),
            Action(1, 1, "x"),
            Action(1, 2, "o"),
            Action(2, 0, "x"),
        ]

        played = []
        while not board.game_over():
            action = agent.get_action(board)
            assert board.apply_action(action)
            played.append(action)

        assert played == expected
        assert board.get_game_status() == GameStatus.X_WINS
        assert board.render() == "x o x\no x o\nx _ _"


class TestRandomAvailableAgent:
    """Test RandomAvailableAgent."""

    def test_seeded_reproducibility(self, board: TicTacToeBoard) -> None:
        """Test that seeded agents produce the same choices."""
        agent1 = RandomAvailableAgent(seed=42)
        agent2 = RandomAvailableAgent(seed=42)

        actions1 = [agent1.get_action(board) for _ in range(10)]
        actions2 = [agent2.get_action(board) for _ in range(10)]

        assert actions1 == actions2

    def test_selects_available_actions(self) -> None:
        """Test that only available actions are chosen."""
        board = TicTacToeBoard.from_string("x_o_x___o")
        available = board.get_available_actions()
        agent = RandomAvailableAgent(seed=3)

        for _ in range(50):
            assert agent.get_action(board) in available

    def test_returns_none_without_moves(self, drawn_board: TicTacToeBoard) -> None:
        """Test that no move is proposed on a full board."""
        assert RandomAvailableAgent(seed=1).get_action(drawn_board) is None

    def test_reset(self, board: TicTacToeBoard) -> None:
        """Test that reset doesn't break agent."""
        agent = RandomAvailableAgent()
        agent.reset()
        assert agent.get_action(board) in board.get_available_actions()


class TestCreateAgent:
    """Test the agent factory."""

    def test_known_names(self) -> None:
        """Test building each agent by name."""
        assert isinstance(create_agent("first"), FirstAvailableAgent)
        random_agent = create_agent("random", seed=5)
        assert isinstance(random_agent, RandomAvailableAgent)
        assert random_agent.seed == 5

    def test_unknown_name(self) -> None:
        """Test that an unknown name raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Unknown agent 'minimax'"):
            create_agent("minimax")
