"""Configuration models for tictactoe-session."""

import os
import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from tictactoe_session.agents import AGENT_NAMES


class PlayersConfig(BaseModel):
    """Which agent plays each side."""

    x: str = Field(default="first", description="Agent playing X")
    o: str = Field(default="first", description="Agent playing O")
    seed: Optional[int] = Field(default=None, description="Seed for random agents")

    @field_validator("x", "o")
    @classmethod
    def validate_agent(cls, v: str) -> str:
        """Validate agent name."""
        v = v.strip().lower()
        if v not in AGENT_NAMES:
            raise ValueError(f"agent must be one of: {', '.join(AGENT_NAMES)}")
        return v

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: Optional[int]) -> Optional[int]:
        """Validate random seed."""
        if v is not None and v < 0:
            raise ValueError("seed must be non-negative")
        return v


class GameConfig(BaseModel):
    """Driver loop configuration."""

    max_half_moves: Optional[int] = Field(
        default=None, description="Abort a game after this many half-moves"
    )

    @field_validator("max_half_moves")
    @classmethod
    def validate_max_half_moves(cls, v: Optional[int]) -> Optional[int]:
        """Validate half-move limit."""
        if v is not None and v < 1:
            raise ValueError("max_half_moves must be at least 1")
        return v


class DisplayConfig(BaseModel):
    """Console output configuration."""

    show_board: bool = Field(default=True, description="Print the grid after every move")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if v.upper() not in valid_levels:
            raise ValueError(f"level must be one of: {', '.join(valid_levels)}")
        return v.upper()


class SessionConfig(BaseModel):
    """Main tictactoe-session configuration."""

    players: PlayersConfig = Field(
        default_factory=PlayersConfig, description="Player configuration"
    )
    game: GameConfig = Field(default_factory=GameConfig, description="Game configuration")
    display: DisplayConfig = Field(
        default_factory=DisplayConfig, description="Display configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )


def resolve_env_vars(obj: Any) -> Any:
    """Recursively resolve environment variables in raw configuration data."""
    if isinstance(obj, dict):
        return {key: resolve_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [resolve_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return _resolve_env_var_string(obj)
    else:
        return obj


def _resolve_env_var_string(value: str) -> str:
    """Resolve environment variables in a string."""
    # ${VAR_NAME} or ${VAR_NAME:default_value}
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replace_var(match):
        var_name = match.group(1)
        default_value = match.group(2) if match.group(2) is not None else ""
        return os.getenv(var_name, default_value)

    return re.sub(pattern, replace_var, value)
