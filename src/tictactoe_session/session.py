"""Driver loop: a board and two agents taking turns until the game ends.

The board has no draw status. When the grid fills without a winner it keeps
reporting a turn state, so the loop ends the game itself as soon as an agent
reports that it has no legal move, and records the outcome as a draw.
"""

import logging
from enum import Enum
from typing import Callable, List, Optional

from pydantic import BaseModel, Field

from tictactoe_session.action import Action
from tictactoe_session.agents.base import Agent
from tictactoe_session.board import TicTacToeBoard
from tictactoe_session.exceptions import StalledGameError
from tictactoe_session.status import GameStatus

logger = logging.getLogger(__name__)

HalfMoveCallback = Callable[[TicTacToeBoard, Action], None]


class Outcome(str, Enum):
    """How a finished game ended."""

    X_WINS = "X_WINS"
    O_WINS = "O_WINS"
    DRAW = "DRAW"


class GameResult(BaseModel):
    """Summary of a finished game."""

    outcome: Outcome
    final_status: GameStatus
    num_moves: int = Field(..., description="Accepted half-moves")
    moves: List[str] = Field(default_factory=list, description="Accepted actions in order")
    final_board: List[str] = Field(default_factory=list, description="Grid rows")


def play_game(
    board: TicTacToeBoard,
    agent_x: Agent,
    agent_o: Agent,
    on_half_move: Optional[HalfMoveCallback] = None,
    max_half_moves: Optional[int] = None,
) -> GameResult:
    """
    Play a single game between two agents.

    Args:
        board: Board to play on (reset before the first move)
        agent_x: Agent playing X
        agent_o: Agent playing O
        on_half_move: Called with (board, action) after every accepted move
        max_half_moves: Stop with StalledGameError after this many moves

    Returns:
        GameResult for the finished game

    Raises:
        StalledGameError: If an agent proposes a move the board rejects, or
            the move limit is reached before the game ends
    """
    board.reset()
    agent_x.reset()
    agent_o.reset()

    num_moves = 0
    agents = (agent_x, agent_o)

    while True:
        for agent in agents:
            action = agent.get_action(board)
            if action is None:
                logger.info("No legal move left; game is drawn")
                return _build_result(board, Outcome.DRAW, num_moves)

            if max_half_moves is not None and num_moves >= max_half_moves:
                raise StalledGameError(
                    f"Game not finished after {num_moves} half-moves"
                )

            if not board.apply_action(action):
                raise StalledGameError(
                    f"{type(agent).__name__} proposed a rejected action: {action}"
                )
            num_moves += 1

            if on_half_move is not None:
                on_half_move(board, action)

            if board.game_over():
                outcome = Outcome(board.get_game_status().value)
                logger.info("Game over after %d half-moves: %s", num_moves, outcome.value)
                return _build_result(board, outcome, num_moves)


def _build_result(board: TicTacToeBoard, outcome: Outcome, num_moves: int) -> GameResult:
    return GameResult(
        outcome=outcome,
        final_status=board.get_game_status(),
        num_moves=num_moves,
        moves=[str(action) for action in board.history],
        final_board=board.render().splitlines(),
    )
