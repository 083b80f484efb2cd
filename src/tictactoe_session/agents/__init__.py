"""Agent implementations for Tic-Tac-Toe."""

from typing import Optional

from tictactoe_session.agents.base import Agent
from tictactoe_session.agents.first_available import FirstAvailableAgent
from tictactoe_session.agents.random import RandomAvailableAgent
from tictactoe_session.exceptions import ConfigurationError

AGENT_NAMES = ("first", "random")


def create_agent(name: str, seed: Optional[int] = None) -> Agent:
    """
    Build an agent from its short name.

    Args:
        name: "first" or "random"
        seed: Seed for agents that use randomness

    Returns:
        New agent instance

    Raises:
        ConfigurationError: If the name is unknown
    """
    if name == "first":
        return FirstAvailableAgent()
    if name == "random":
        return RandomAvailableAgent(seed=seed)
    raise ConfigurationError(
        f"Unknown agent '{name}'. Valid agents: {', '.join(AGENT_NAMES)}"
    )


__all__ = [
    "Agent",
    "FirstAvailableAgent",
    "RandomAvailableAgent",
    "AGENT_NAMES",
    "create_agent",
]
