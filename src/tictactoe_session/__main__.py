"""Allow running as ``python -m tictactoe_session``."""

from tictactoe_session.cli import main

if __name__ == "__main__":
    main()
