"""Shared pytest fixtures for tictactoe-session tests."""

import pytest

from tictactoe_session.board import TicTacToeBoard


@pytest.fixture
def board() -> TicTacToeBoard:
    """Fresh board with X to move."""
    return TicTacToeBoard()


@pytest.fixture
def drawn_board() -> TicTacToeBoard:
    """Full board with no complete line, O nominally on turn."""
    # x o x
    # x o o
    # o x x
    return TicTacToeBoard.from_string("xoxxoooxx", x_turn=False)
