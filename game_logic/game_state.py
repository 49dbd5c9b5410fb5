"""
Game state model for TicTacToe with time travel.
Defines cells, boards, turn parity, and the derived game status.
"""

from enum import Enum, IntEnum
from typing import Iterable, List, Optional, Tuple, Union
from dataclasses import dataclass

import numpy as np

from .config import GameConfig


class Cell(IntEnum):
    """The three values a board cell can hold."""
    EMPTY = 0
    X = 1
    O = 2

    @property
    def symbol(self) -> str:
        """Printable symbol for this cell."""
        if self == Cell.EMPTY:
            return GameConfig.EMPTY_SYMBOL
        return GameConfig.MARK_SYMBOLS[self.name]

    @classmethod
    def parse(cls, value: Union["Cell", int, str, None]) -> "Cell":
        """
        Convert a loose cell value into a Cell.

        Accepts Cell, 0/1/2, "X"/"O" (any case), and None/""/" "/"." for empty.
        """
        if value is None:
            return cls.EMPTY
        if isinstance(value, str):
            text = value.strip().upper()
            if text in ("", "."):
                return cls.EMPTY
            try:
                return cls[text]
            except KeyError:
                raise ValueError(f"Unknown cell value {value!r}") from None
        return cls(int(value))


class GameStatus(Enum):
    """Where a game stands for a given board."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


# A board is a flat int8 array of 9 cells, index = row * 3 + col
Board = np.ndarray

# One of the 8 winning index triples
WinLine = Tuple[int, int, int]


@dataclass(frozen=True)
class GameState:
    """
    The state of a game as seen from one board.

    Always derived from the board, never stored next to it.
    """
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Cell] = None       # Set only when status is WON
    line: Optional[WinLine] = None      # The winning line when status is WON

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == GameStatus.DRAW


def freeze(board: Board) -> Board:
    """Mark a board read-only so it can be stored as a snapshot."""
    board.flags.writeable = False
    return board


def new_board() -> Board:
    """Create an empty, read-only board."""
    return freeze(np.zeros(GameConfig.CELL_COUNT, dtype=np.int8))


def as_board(cells: Iterable) -> Board:
    """
    Build a read-only board from any 9 cell values.

    Args:
        cells: Iterable of Cell, ints, or "X"/"O"/" " strings. A single
            9-character string such as "XX OO    " also works.

    Returns:
        A new frozen board.
    """
    values = [int(Cell.parse(c)) for c in cells]
    if len(values) != GameConfig.CELL_COUNT:
        raise ValueError(
            f"A board needs {GameConfig.CELL_COUNT} cells, got {len(values)}"
        )
    return freeze(np.array(values, dtype=np.int8))


def check_board(board: Board) -> None:
    """Raise ValueError if the array is not a 9-cell board."""
    if board.shape != (GameConfig.CELL_COUNT,):
        raise ValueError(
            f"A board needs shape ({GameConfig.CELL_COUNT},), got {board.shape}"
        )


def place_mark(board: Board, cell_index: int, mark: Cell) -> Board:
    """
    Return a new snapshot with one cell set. The input board is untouched.
    """
    next_board = np.array(board, dtype=np.int8)
    next_board[cell_index] = mark
    return freeze(next_board)


def player_for_index(history_index: int) -> Cell:
    """Turn parity: X moves from even history indices, O from odd ones."""
    return Cell.X if history_index % 2 == 0 else Cell.O


def index_to_row_col(cell_index: int) -> Tuple[int, int]:
    """Convert a flat cell index to (row, col)."""
    return cell_index // GameConfig.BOARD_SIZE, cell_index % GameConfig.BOARD_SIZE


def empty_cells(board: Board) -> List[int]:
    """Indices of all empty cells."""
    return [int(i) for i in np.flatnonzero(board == Cell.EMPTY)]


def format_board(board: Board, highlight: Optional[WinLine] = None) -> str:
    """
    Render a board as text, with winning cells wrapped in brackets.
    """
    highlight = highlight or ()
    size = GameConfig.BOARD_SIZE
    lines = ["    " + "   ".join(str(col) for col in range(size))]
    for row in range(size):
        cells = []
        for col in range(size):
            index = row * size + col
            symbol = Cell(int(board[index])).symbol
            cells.append(f"[{symbol}]" if index in highlight else f" {symbol} ")
        lines.append(f"{row} " + "|".join(cells))
        if row < size - 1:
            lines.append("  " + "+".join(["---"] * size))
    return "\n".join(lines)
