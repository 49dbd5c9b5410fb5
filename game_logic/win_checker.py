"""
Win checker for TicTacToe with time travel.
Checks if a mark has won or if the board is a draw.
"""

from typing import Optional, Tuple

import numpy as np

from .game_state import Board, Cell, GameState, GameStatus, WinLine, check_board


# All possible winning lines, in priority order
WIN_LINES: Tuple[WinLine, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

# Same lines as an (8, 3) index array for vectorized lookups
WIN_LINE_INDICES = np.array(WIN_LINES, dtype=np.intp)
WIN_LINE_INDICES.flags.writeable = False


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a row
    (horizontally, vertically, or diagonally).
    When more than one line is complete, the first one in
    WIN_LINES order wins the tie.
    """

    WINNING_LINES = WIN_LINES

    def evaluate(self, board: Board) -> Tuple[Optional[Cell], Optional[WinLine]]:
        """
        Find the winner and the line that won.

        Args:
            board: Any 9-cell board, legal or not.

        Returns:
            (winner, line), or (None, None) if no line is complete.
        """
        board = np.asarray(board)
        check_board(board)

        # cells[i] holds the three marks on line i
        cells = board[WIN_LINE_INDICES]
        complete = (
            (cells[:, 0] != Cell.EMPTY)
            & (cells[:, 0] == cells[:, 1])
            & (cells[:, 1] == cells[:, 2])
        )

        hits = np.flatnonzero(complete)
        if len(hits) == 0:
            return None, None

        first = int(hits[0])
        line = self.WINNING_LINES[first]
        return Cell(int(board[line[0]])), line

    def check_winner(self, board: Board) -> Optional[Cell]:
        """Get the winning mark, or None if no winner yet."""
        winner, _ = self.evaluate(board)
        return winner

    def get_winning_line(self, board: Board) -> Optional[WinLine]:
        """Get the winning line if there is one."""
        _, line = self.evaluate(board)
        return line

    def is_full(self, board: Board) -> bool:
        """True when no empty cell is left."""
        return bool(np.all(np.asarray(board) != Cell.EMPTY))

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw.

        A draw needs every cell filled AND no winner. A line completed
        by the last move is a win, not a draw.
        """
        if self.check_winner(board) is not None:
            return False
        return self.is_full(board)

    def get_state(self, board: Board) -> GameState:
        """
        Derive the game state for a board.

        The winner check runs before the full-board check, so a win
        on the 9th move is reported as WON.
        """
        winner, line = self.evaluate(board)

        if winner is not None:
            return GameState(status=GameStatus.WON, winner=winner, line=line)
        if self.is_full(board):
            return GameState(status=GameStatus.DRAW)
        return GameState(status=GameStatus.IN_PROGRESS)


_checker = WinChecker()


def evaluate(board: Board) -> Tuple[Optional[Cell], Optional[WinLine]]:
    """Module-level shortcut for WinChecker().evaluate(board)."""
    return _checker.evaluate(board)


def get_state(board: Board) -> GameState:
    """Module-level shortcut for WinChecker().get_state(board)."""
    return _checker.get_state(board)
