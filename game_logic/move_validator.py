"""
Move validator for TicTacToe with time travel.
Validates clicks on cells and jumps through the move history.
"""

from enum import Enum
from typing import List, Optional, Sequence
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, Cell, empty_cells
from .win_checker import WinChecker


class MoveError(Enum):
    """Why an action was rejected."""
    OCCUPIED_CELL = "occupied_cell"      # Cell already holds X or O
    GAME_OVER = "game_over"              # Board already has a winner
    OUT_OF_RANGE = "out_of_range"        # Index outside the board or history
    CORRUPT_HISTORY = "corrupt_history"  # Consecutive snapshots differ by != 1 cell


@dataclass
class ValidationResult:
    """Result of validation. Rejections carry an error and a message."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None

    @classmethod
    def reject(cls, error: MoveError, message: str) -> "ValidationResult":
        return cls(is_valid=False, error=error, error_message=message)


class MoveValidator:
    """
    Validates TicTacToe actions.

    Rules:
    1. No move once the board has a winner
    2. Can only place on empty cells
    3. Cell and history indices must be in range
    """

    def __init__(self):
        self.win_checker = WinChecker()

    def validate_move(self, board: Board, cell_index: int) -> ValidationResult:
        """
        Validate placing the next mark on a board.

        Args:
            board: The board being played on.
            cell_index: Cell to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        if not (0 <= cell_index < GameConfig.CELL_COUNT):
            return ValidationResult.reject(
                MoveError.OUT_OF_RANGE,
                f"Invalid cell {cell_index}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Checked before occupancy so a second click on a won board
        # reports the finished game
        winner = self.win_checker.check_winner(board)
        if winner is not None:
            return ValidationResult.reject(
                MoveError.GAME_OVER,
                f"Game is already over! {winner.name} won."
            )

        if board[cell_index] != Cell.EMPTY:
            occupant = Cell(int(board[cell_index]))
            return ValidationResult.reject(
                MoveError.OCCUPIED_CELL,
                f"Cell {cell_index} is already occupied by {occupant.name}"
            )

        return ValidationResult(is_valid=True)

    def validate_index(self, history: Sequence[Board], index: int) -> ValidationResult:
        """
        Validate a cursor or jump target against the history bounds.

        Args:
            history: The snapshot sequence.
            index: Index into the history.

        Returns:
            ValidationResult.
        """
        if not (0 <= index < len(history)):
            return ValidationResult.reject(
                MoveError.OUT_OF_RANGE,
                f"History index {index} out of range. Must be 0-{len(history) - 1}."
            )
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all cells the next mark can go on.

        Returns:
            List of cell indices; empty once the board is won.
        """
        if self.win_checker.check_winner(board) is not None:
            return []
        return empty_cells(board)
