"""Configuration for tictactoe-session."""

from tictactoe_session.config.loader import get_config_paths, load_config, save_config
from tictactoe_session.config.models import (
    DisplayConfig,
    GameConfig,
    LoggingConfig,
    PlayersConfig,
    SessionConfig,
)

__all__ = [
    "SessionConfig",
    "PlayersConfig",
    "GameConfig",
    "DisplayConfig",
    "LoggingConfig",
    "load_config",
    "save_config",
    "get_config_paths",
]
