"""
View model for TicTacToe with time travel.
Turns a (history, cursor) pair into everything a front end needs to draw.
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Board, Cell, GameState, GameStatus, WinLine, player_for_index
from .game_history import History, MoveDescriptor, describe_move
from .move_validator import MoveValidator
from .win_checker import get_state


_validator = MoveValidator()


@dataclass(frozen=True)
class HistoryEntry:
    """One row of the history list."""
    index: int
    label: str
    is_current: bool


@dataclass(frozen=True)
class BoardView:
    """Render input for one frame."""
    board: Board
    cursor: int
    next_player: Cell
    state: GameState
    status_text: str
    entries: Tuple[HistoryEntry, ...]

    @property
    def winning_line(self) -> Optional[WinLine]:
        return self.state.line


def status_text(state: GameState, next_player: Cell) -> str:
    """Status line: the winner, a draw, or whose turn it is."""
    if state.status == GameStatus.WON:
        return GameConfig.WINNER_STATUS.format(mark=state.winner.symbol)
    if state.status == GameStatus.DRAW:
        return GameConfig.DRAW_STATUS
    return GameConfig.NEXT_PLAYER_STATUS.format(mark=next_player.symbol)


def move_label(descriptor: MoveDescriptor, is_current: bool = False) -> str:
    """Label for one history entry."""
    if descriptor.is_game_start:
        return GameConfig.GAME_START_LABEL

    template = GameConfig.CURRENT_MOVE_LABEL if is_current else GameConfig.MOVE_LABEL
    return template.format(
        number=descriptor.move_index,
        mark=descriptor.mark.symbol,
        row=descriptor.row,
        col=descriptor.col,
    )


def history_entries(history: History, cursor: int) -> List[HistoryEntry]:
    entries = []
    for index in range(len(history)):
        result = describe_move(history, index)
        is_current = index == cursor
        if result.is_valid:
            label = move_label(result.descriptor, is_current)
        else:
            label = GameConfig.CORRUPT_MOVE_LABEL.format(number=index)
        entries.append(HistoryEntry(index=index, label=label, is_current=is_current))
    return entries


def build_view(history: History, cursor: int) -> BoardView:
    """
    Build the render input for the snapshot at the cursor.

    The winning line is re-derived from the board each time.
    Raises ValueError if the cursor is outside the history.
    """
    check = _validator.validate_index(history, cursor)
    if not check.is_valid:
        raise ValueError(check.error_message)

    board = history[cursor]
    state = get_state(board)
    next_player = player_for_index(cursor)

    return BoardView(
        board=board,
        cursor=cursor,
        next_player=next_player,
        state=state,
        status_text=status_text(state, next_player),
        entries=tuple(history_entries(history, cursor)),
    )
