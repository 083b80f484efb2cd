"""Evaluation utilities for comparing agents."""

from typing import Any, Dict

from tictactoe_session.agents.base import Agent
from tictactoe_session.board import TicTacToeBoard
from tictactoe_session.session import Outcome, play_game


def evaluate_agents(
    agent_x: Agent,
    agent_o: Agent,
    agent_x_name: str,
    agent_o_name: str,
    num_games: int = 100,
) -> Dict[str, Any]:
    """
    Evaluate two agents against each other.

    Args:
        agent_x: Agent playing X in every game
        agent_o: Agent playing O in every game
        agent_x_name: Name of the X agent for display
        agent_o_name: Name of the O agent for display
        num_games: Number of games to play

    Returns:
        Dictionary with evaluation results

    Raises:
        ValueError: If num_games is less than 1
    """
    if num_games < 1:
        raise ValueError("num_games must be at least 1")

    board = TicTacToeBoard()

    x_wins = 0
    o_wins = 0
    draws = 0
    total_moves = 0

    for _ in range(num_games):
        result = play_game(board, agent_x, agent_o)
        total_moves += result.num_moves

        if result.outcome == Outcome.X_WINS:
            x_wins += 1
        elif result.outcome == Outcome.O_WINS:
            o_wins += 1
        else:
            draws += 1

    return {
        "agent_x_name": agent_x_name,
        "agent_o_name": agent_o_name,
        "num_games": num_games,
        "x_wins": x_wins,
        "o_wins": o_wins,
        "draws": draws,
        "x_win_rate": x_wins / num_games,
        "o_win_rate": o_wins / num_games,
        "draw_rate": draws / num_games,
        "avg_moves_per_game": total_moves / num_games,
    }
