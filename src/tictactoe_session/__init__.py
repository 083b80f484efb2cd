"""
tictactoe-session: a 3x3 Tic-Tac-Toe board state machine and pluggable agents

A session consists of a game board and two agents. Each agent takes a turn
at modifying the board state until a terminal state is reached.
"""

__version__ = "0.1.0"

from tictactoe_session.action import NO_MOVE, Action
from tictactoe_session.board import TicTacToeBoard
from tictactoe_session.exceptions import TicTacToeSessionError
from tictactoe_session.status import GameStatus, status_to_string

__all__ = [
    "Action",
    "NO_MOVE",
    "GameStatus",
    "TicTacToeBoard",
    "TicTacToeSessionError",
    "status_to_string",
    "__version__",
]
