"""
Logic module for TicTacToe with time travel.
Handles board state, win detection, and the move history.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import Cell, GameState, GameStatus, as_board, new_board
from .move_validator import MoveError, MoveValidator, ValidationResult
from .win_checker import WIN_LINES, WinChecker, evaluate
from .game_history import (
    GameHistory,
    MoveDescriptor,
    apply_move,
    describe_move,
    jump_to,
    new_history,
)
from .view import BoardView, HistoryEntry, build_view
