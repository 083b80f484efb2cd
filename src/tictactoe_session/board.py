"""Tic-Tac-Toe board state machine."""

import logging
from typing import List, Sequence

import numpy as np
import numpy.typing as npt

from tictactoe_session.action import Action
from tictactoe_session.exceptions import BoardStateError
from tictactoe_session.status import (
    EMPTY,
    MARKS,
    O_MARK,
    X_MARK,
    GameStatus,
    is_terminal_status,
    mark_for_status,
)

logger = logging.getLogger(__name__)

BOARD_SIZE = 3


class TicTacToeBoard:
    """
    3x3 Tic-Tac-Toe board.

    State representation:
        - 3x3 array of single characters
        - "_" = empty, "x" = player X, "o" = player O

    Cells are addressed by (row_index, column_index), zero-based, row-major:
        (0,0) (0,1) (0,2)
        (1,0) (1,1) (1,2)
        (2,0) (2,1) (2,2)

    apply_action is the only way to change a cell during play. Invalid
    actions are rejected with a diagnostic and leave the board untouched.
    """

    def __init__(self) -> None:
        """Initialize an empty board with X to move."""
        self._grid: npt.NDArray[np.str_] = np.full(
            (BOARD_SIZE, BOARD_SIZE), EMPTY, dtype="<U1"
        )
        self._status: GameStatus = GameStatus.X_TURN
        self._x_turn: bool = True
        self._history: List[Action] = []
        self.reset()

    @classmethod
    def from_string(cls, cells: str, x_turn: bool = True) -> "TicTacToeBoard":
        """
        Build a board from a 9-character row-major string of x/o/_.

        Args:
            cells: Cell marks, e.g. "xo_______"
            x_turn: Whether X moves next

        Returns:
            Board holding that position with its status evaluated

        Raises:
            BoardStateError: If the string is not 9 valid marks
        """
        if len(cells) != BOARD_SIZE * BOARD_SIZE:
            raise BoardStateError(
                f"Board string must have {BOARD_SIZE * BOARD_SIZE} cells, got {len(cells)}"
            )
        board = cls()
        board.load_state(
            [list(cells[i:i + BOARD_SIZE]) for i in range(0, len(cells), BOARD_SIZE)],
            x_turn=x_turn,
        )
        return board

    def get_board_state(self) -> npt.NDArray[np.str_]:
        """Return a copy of the 3x3 grid."""
        return self._grid.copy()

    def reset(self) -> None:
        """Clear every cell and give the move to X."""
        self._status = GameStatus.X_TURN
        self._grid.fill(EMPTY)
        self._x_turn = True
        self._history = []

    def is_action_valid(self, action: Action) -> bool:
        """
        Check whether an action can be applied right now.

        An action is rejected once the game is over, when its mark does not
        belong to the player on turn, when it points outside the grid, or
        when the target cell is taken.

        Args:
            action: Proposed move

        Returns:
            True if apply_action would accept it
        """
        if self.game_over():
            return False

        if action.mark != mark_for_status(self._status):
            logger.warning("Wrong turn: %s cannot play on %s", action.mark, self._status.value)
            return False

        if not self._in_bounds(action.row_index, action.column_index):
            return False

        occupant = self._grid[action.row_index, action.column_index]
        if occupant != EMPTY:
            logger.warning(
                "Tried to take a move on an occupied space: (%d, %d) holds %s",
                action.row_index,
                action.column_index,
                occupant,
            )
            return False

        return True

    def get_available_actions(self) -> List[Action]:
        """
        List every empty cell as an action for the player on turn.

        Returns:
            Actions in row-major order; empty once the game is over
        """
        if self.game_over():
            return []

        turn_mark = mark_for_status(self._status)
        return [
            Action(int(row), int(column), turn_mark)
            for row, column in np.argwhere(self._grid == EMPTY)
        ]

    def apply_action(self, action: Action) -> bool:
        """
        Apply an action if it is valid.

        Args:
            action: Proposed move

        Returns:
            True if the move was applied, False if it was rejected
        """
        logger.debug("Trying to apply action: %s", action)
        if not self.is_action_valid(action):
            logger.warning("Tried to apply invalid action: %s", action)
            return False

        self._grid[action.row_index, action.column_index] = action.mark
        self._x_turn = not self._x_turn
        self._history.append(action)
        self._status = self._evaluate_status()
        return True

    def get_game_status(self) -> GameStatus:
        """Return the current status."""
        return self._status

    def game_over(self) -> bool:
        """Check if a player has won."""
        return is_terminal_status(self._status)

    def is_full(self) -> bool:
        """Check if no empty cell remains."""
        return not np.any(self._grid == EMPTY)

    @property
    def x_turn(self) -> bool:
        """Turn flag; True while X is to move."""
        return self._x_turn

    @property
    def history(self) -> List[Action]:
        """Accepted actions since the last reset, oldest first."""
        return list(self._history)

    def load_state(
        self, grid: Sequence[Sequence[str]], x_turn: bool = True
    ) -> GameStatus:
        """
        Replace the grid with an arbitrary position.

        The position does not have to be reachable by legal play; the status
        is evaluated exactly as it would be after a move.

        Args:
            grid: 3x3 nested sequence of "x", "o" or "_"
            x_turn: Turn flag to use when no line is complete

        Returns:
            Status of the loaded position

        Raises:
            BoardStateError: If the grid has the wrong shape or unknown marks
        """
        try:
            cells = np.asarray(grid, dtype=str)
        except ValueError as e:
            raise BoardStateError(f"Board must be a 3x3 grid of marks: {e}") from e
        if cells.shape != (BOARD_SIZE, BOARD_SIZE):
            raise BoardStateError(
                f"Board must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {cells.shape}"
            )
        unknown = set(cells.flatten().tolist()) - {EMPTY, *MARKS}
        if unknown:
            raise BoardStateError(f"Unknown marks in board: {sorted(unknown)}")

        self._grid = cells.astype("<U1")
        self._x_turn = x_turn
        self._history = []
        self._status = self._evaluate_status()
        return self._status

    def render(self) -> str:
        """
        Render the grid as three lines of space-separated marks.

        Returns:
            String representation of the board
        """
        return "\n".join(" ".join(row) for row in self._grid)

    def _in_bounds(self, row_index: int, column_index: int) -> bool:
        return 0 <= row_index < BOARD_SIZE and 0 <= column_index < BOARD_SIZE

    def _evaluate_status(self) -> GameStatus:
        """
        Evaluate the whole grid.

        Rows and columns test "o" before "x"; the diagonals test "x" before
        "o". The order only shows on positions legal play cannot produce.
        """
        for row_index in range(BOARD_SIZE):
            if self._line_is(self._grid[row_index, :], O_MARK):
                return GameStatus.O_WINS
            if self._line_is(self._grid[row_index, :], X_MARK):
                return GameStatus.X_WINS

        for column_index in range(BOARD_SIZE):
            if self._line_is(self._grid[:, column_index], O_MARK):
                return GameStatus.O_WINS
            if self._line_is(self._grid[:, column_index], X_MARK):
                return GameStatus.X_WINS

        main_diagonal = np.diag(self._grid)
        anti_diagonal = np.diag(np.fliplr(self._grid))
        if self._line_is(main_diagonal, X_MARK) or self._line_is(anti_diagonal, X_MARK):
            return GameStatus.X_WINS
        if self._line_is(main_diagonal, O_MARK) or self._line_is(anti_diagonal, O_MARK):
            return GameStatus.O_WINS

        return GameStatus.X_TURN if self._x_turn else GameStatus.O_TURN

    @staticmethod
    def _line_is(line: npt.NDArray[np.str_], mark: str) -> bool:
        return bool(np.all(line == mark))

    def __repr__(self) -> str:
        cells = "".join(self._grid.flatten().tolist())
        return f"TicTacToeBoard({cells!r}, status={self._status.value})"
