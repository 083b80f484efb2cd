"""Exception classes for tictactoe-session."""


class TicTacToeSessionError(Exception):
    """Base exception for all tictactoe-session errors."""

    pass


class ConfigurationError(TicTacToeSessionError):
    """Raised when configuration is invalid."""

    pass


class BoardStateError(TicTacToeSessionError):
    """Raised when a board position cannot be loaded."""

    pass


class StalledGameError(TicTacToeSessionError):
    """Raised when a game stops making progress before reaching an end."""

    pass
