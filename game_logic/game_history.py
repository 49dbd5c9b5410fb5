"""
Move history for TicTacToe with time travel.

A history is a tuple of read-only board snapshots. Index 0 is the empty
board and every later snapshot adds exactly one mark. A cursor selects
the snapshot being viewed. Playing from an earlier snapshot drops the
snapshots after the cursor before appending, so there is only ever one
timeline.

The functions here never mutate their inputs. GameHistory is the one
stateful object: it owns a (history, cursor) pair for a single caller.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass

import numpy as np

from .config import GameConfig
from .game_state import (
    Board,
    Cell,
    GameState,
    WinLine,
    as_board,
    index_to_row_col,
    new_board,
    place_mark,
    player_for_index,
)
from .move_validator import MoveError, MoveValidator, ValidationResult
from .win_checker import WinChecker


History = Tuple[Board, ...]


@dataclass
class MoveResult(ValidationResult):
    """Result of apply_move. history/cursor are set only when valid."""
    history: Optional[History] = None
    cursor: Optional[int] = None


@dataclass
class JumpResult(ValidationResult):
    """Result of jump_to. cursor is set only when valid."""
    cursor: Optional[int] = None


@dataclass(frozen=True)
class MoveDescriptor:
    """
    What happened at one history index.

    For index 0 (game start) cell_index, row, col and mark are all None.
    """
    move_index: int
    cell_index: Optional[int] = None
    row: Optional[int] = None
    col: Optional[int] = None
    mark: Optional[Cell] = None

    @property
    def is_game_start(self) -> bool:
        return self.cell_index is None


@dataclass
class DescribeResult(ValidationResult):
    """Result of describe_move. descriptor is set only when valid."""
    descriptor: Optional[MoveDescriptor] = None


_validator = MoveValidator()


def new_history() -> History:
    """A history holding only the empty board."""
    return (new_board(),)


def apply_move(history: History, cursor: int, cell_index: int) -> MoveResult:
    """
    Place the next mark on the snapshot at the cursor.

    Args:
        history: The current snapshots.
        cursor: Index of the snapshot being played on.
        cell_index: Cell to place the mark on (0-8).

    Returns:
        MoveResult with the new history and cursor, or the rejection.
        The input history is left as it was.
    """
    check = _validator.validate_index(history, cursor)
    if not check.is_valid:
        return MoveResult(False, check.error, check.error_message)

    board = history[cursor]
    check = _validator.validate_move(board, cell_index)
    if not check.is_valid:
        return MoveResult(False, check.error, check.error_message)

    next_board = place_mark(board, cell_index, player_for_index(cursor))

    # Anything after the cursor is an abandoned future
    next_history = tuple(history[:cursor + 1]) + (next_board,)
    return MoveResult(True, history=next_history, cursor=cursor + 1)


def jump_to(history: History, target_index: int) -> JumpResult:
    """
    Move the cursor to any recorded snapshot.

    Returns:
        JumpResult with the new cursor, or OUT_OF_RANGE.
    """
    check = _validator.validate_index(history, target_index)
    if not check.is_valid:
        return JumpResult(False, check.error, check.error_message)
    return JumpResult(True, cursor=target_index)


def describe_move(history: History, move_index: int) -> DescribeResult:
    """
    Work out which cell and mark a history index added.

    Diffs the snapshot against the one before it. Anything other than a
    single empty cell gaining a mark means the history was tampered with,
    and is reported as CORRUPT_HISTORY.
    """
    check = _validator.validate_index(history, move_index)
    if not check.is_valid:
        return DescribeResult(False, check.error, check.error_message)

    if move_index == 0:
        return DescribeResult(True, descriptor=MoveDescriptor(move_index=0))

    before = np.asarray(history[move_index - 1])
    after = np.asarray(history[move_index])
    changed = np.flatnonzero(before != after)

    if len(changed) != 1:
        return DescribeResult.reject(
            MoveError.CORRUPT_HISTORY,
            f"Move {move_index} changed {len(changed)} cells, expected 1"
        )

    cell_index = int(changed[0])
    if before[cell_index] != Cell.EMPTY or after[cell_index] == Cell.EMPTY:
        return DescribeResult.reject(
            MoveError.CORRUPT_HISTORY,
            f"Move {move_index} changed cell {cell_index} from "
            f"{Cell(int(before[cell_index])).name} to {Cell(int(after[cell_index])).name}"
        )

    row, col = index_to_row_col(cell_index)
    descriptor = MoveDescriptor(
        move_index=move_index,
        cell_index=cell_index,
        row=row,
        col=col,
        mark=Cell(int(after[cell_index])),
    )
    return DescribeResult(True, descriptor=descriptor)


class GameHistory:
    """
    Owns the (history, cursor) pair for one game.

    Every action either replaces the pair with a new one or leaves it
    alone and returns the rejection. Earlier snapshots are shared, never
    copied or changed.
    """

    def __init__(self, history: Optional[History] = None, cursor: Optional[int] = None):
        """
        Start a game, or resume one from an existing history.

        Args:
            history: Snapshots to resume from (default: a new game). Each
                one is copied into a read-only board, so plain lists work.
            cursor: Snapshot to view (default: the last one).
        """
        if history is None:
            self.history: History = new_history()
        else:
            self.history = tuple(as_board(board) for board in history)
        if not self.history:
            raise ValueError("A history needs at least the starting board")

        self.cursor: int = len(self.history) - 1 if cursor is None else cursor
        if not (0 <= self.cursor < len(self.history)):
            raise ValueError(f"Cursor {self.cursor} is outside the history")

        self.win_checker = WinChecker()
        self.validator = MoveValidator()

    @property
    def current_board(self) -> Board:
        return self.history[self.cursor]

    @property
    def next_player(self) -> Cell:
        """Whose turn it is at the cursor."""
        return player_for_index(self.cursor)

    @property
    def state(self) -> GameState:
        return self.win_checker.get_state(self.current_board)

    @property
    def winning_line(self) -> Optional[WinLine]:
        return self.win_checker.get_winning_line(self.current_board)

    @property
    def is_game_over(self) -> bool:
        return self.state.is_game_over

    def play(self, cell_index: int) -> MoveResult:
        """Place the next mark at the cursor and move the cursor to it."""
        result = apply_move(self.history, self.cursor, cell_index)

        if result.is_valid:
            self.history = result.history
            self.cursor = result.cursor
        elif GameConfig.DEBUG_MODE:
            print(f"Warning: move rejected: {result.error_message}")

        return result

    def jump(self, target_index: int) -> JumpResult:
        """Move the cursor to an earlier or later snapshot."""
        result = jump_to(self.history, target_index)

        if result.is_valid:
            self.cursor = result.cursor
        elif GameConfig.DEBUG_MODE:
            print(f"Warning: jump rejected: {result.error_message}")

        return result

    def describe(self, move_index: int) -> DescribeResult:
        result = describe_move(self.history, move_index)

        if result.error == MoveError.CORRUPT_HISTORY and GameConfig.DEBUG_MODE:
            print(f"Warning: corrupt history: {result.error_message}")

        return result

    def descriptors(self) -> List[DescribeResult]:
        """Describe every snapshot, in order."""
        return [self.describe(i) for i in range(len(self.history))]

    def valid_moves(self) -> List[int]:
        return self.validator.get_valid_moves(self.current_board)

    def reset(self):
        """Start over from an empty board."""
        self.history = new_history()
        self.cursor = 0

    def __len__(self) -> int:
        return len(self.history)
