"""
Tests for the win checker.
"""

import numpy as np
import pytest

from game_logic.game_state import Cell, GameStatus, as_board, new_board
from game_logic.win_checker import WIN_LINES, WinChecker, evaluate, get_state


def board_with(marks):
    """Board with the given {cell_index: Cell} marks, empty elsewhere."""
    cells = [Cell.EMPTY] * 9
    for index, mark in marks.items():
        cells[index] = mark
    return as_board(cells)


def test_empty_board_has_no_winner():
    assert evaluate(new_board()) == (None, None)


@pytest.mark.parametrize("line", WIN_LINES)
@pytest.mark.parametrize("mark", [Cell.X, Cell.O])
def test_every_line_wins(line, mark):
    board = board_with({index: mark for index in line})

    winner, found = evaluate(board)

    assert winner == mark
    assert found == line


def test_mixed_line_is_not_a_win():
    board = as_board("XXO      ")
    assert evaluate(board) == (None, None)


def test_row_win_from_string_board():
    board = as_board("XXXOO    ")
    assert evaluate(board) == (Cell.X, (0, 1, 2))


@pytest.mark.parametrize(
    "board, expected_line",
    [
        # Full board of X: the top row comes first
        ("XXXXXXXXX", (0, 1, 2)),
        # Bottom row and left column: rows are checked before columns
        ("X  X  XXX", (6, 7, 8)),
        # Left column and main diagonal: columns before diagonals
        ("X  XX XOX", (0, 3, 6)),
        # Both diagonals
        ("O O O O O", (0, 4, 8)),
    ],
)
def test_several_lines_use_priority_order(board, expected_line):
    _, line = evaluate(as_board(board))
    assert line == expected_line


def test_evaluate_does_not_assume_legal_play():
    # O has two lines, X has one; X's row comes first
    board = as_board("XXXOOOOOO")
    assert evaluate(board) == (Cell.X, (0, 1, 2))


def test_evaluate_rejects_wrong_size():
    with pytest.raises(ValueError):
        evaluate(np.zeros(8, dtype=np.int8))


def test_evaluate_accepts_plain_lists():
    assert evaluate([1, 1, 1, 0, 0, 0, 0, 0, 0]) == (Cell.X, (0, 1, 2))


def test_draw_needs_full_board():
    checker = WinChecker()

    assert not checker.check_draw(as_board("XOX OO   "))
    assert checker.check_draw(as_board("XOXXOOOXX"))


def test_win_on_last_cell_beats_draw():
    # X completes the top row with the 9th mark
    board = as_board("XXXOOXXOO")
    state = get_state(board)

    assert state.status == GameStatus.WON
    assert state.winner == Cell.X
    assert state.line == (0, 1, 2)
    assert not WinChecker().check_draw(board)


@pytest.mark.parametrize(
    "board, status",
    [
        ("         ", GameStatus.IN_PROGRESS),
        ("X   O    ", GameStatus.IN_PROGRESS),
        ("XOXXOOOXX", GameStatus.DRAW),
        ("OX OX  X ", GameStatus.WON),
    ],
)
def test_get_state(board, status):
    state = get_state(as_board(board))
    assert state.status == status
    assert state.is_game_over == (status != GameStatus.IN_PROGRESS)


def test_win_lines_are_read_only():
    from game_logic.win_checker import WIN_LINE_INDICES

    assert WIN_LINE_INDICES.shape == (8, 3)
    with pytest.raises(ValueError):
        WIN_LINE_INDICES[0, 0] = 5
