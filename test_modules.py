"""
Tests for the small building blocks: config, board helpers, and the move validator.
"""

import numpy as np
import pytest

from game_logic.config import GameConfig
from game_logic.game_state import (
    Cell,
    as_board,
    empty_cells,
    format_board,
    index_to_row_col,
    new_board,
    place_mark,
    player_for_index,
)
from game_logic.move_validator import MoveError, MoveValidator


def test_config():
    assert GameConfig.BOARD_SIZE == 3
    assert GameConfig.CELL_COUNT == 9


@pytest.mark.parametrize("value", ["Z", "XO", 7])
def test_cell_parse_rejects_unknown_values(value):
    with pytest.raises(ValueError):
        Cell.parse(value)


def test_as_board_rejects_unknown_symbols():
    with pytest.raises(ValueError, match="Unknown cell value 'Z'"):
        as_board("XZ       ")


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Cell.EMPTY),
        ("", Cell.EMPTY),
        (" ", Cell.EMPTY),
        (".", Cell.EMPTY),
        ("x", Cell.X),
        ("O", Cell.O),
        (2, Cell.O),
        (Cell.X, Cell.X),
    ],
)
def test_cell_parse(value, expected):
    assert Cell.parse(value) == expected


def test_as_board_checks_length():
    with pytest.raises(ValueError):
        as_board("XO")


def test_new_board_is_empty_and_read_only():
    board = new_board()

    assert board.shape == (9,)
    assert not board.any()
    assert not board.flags.writeable


def test_place_mark_returns_new_snapshot():
    board = new_board()

    placed = place_mark(board, 4, Cell.O)

    assert placed is not board
    assert board[4] == Cell.EMPTY
    assert placed[4] == Cell.O
    assert not placed.flags.writeable


@pytest.mark.parametrize("index, player", [(0, Cell.X), (1, Cell.O), (2, Cell.X), (7, Cell.O)])
def test_turn_parity(index, player):
    assert player_for_index(index) == player


def test_index_to_row_col():
    assert [index_to_row_col(i) for i in range(9)] == [
        (0, 0), (0, 1), (0, 2),
        (1, 0), (1, 1), (1, 2),
        (2, 0), (2, 1), (2, 2),
    ]


def test_empty_cells():
    assert empty_cells(as_board("XO X O  X")) == [2, 4, 6, 7]


def test_format_board_highlights_line():
    text = format_board(as_board("XXXOO    "), highlight=(0, 1, 2))

    assert "[X]|[X]|[X]" in text
    assert " O | O |   " in text


class TestMoveValidator:

    def setup_method(self):
        self.validator = MoveValidator()

    def test_valid_move(self):
        result = self.validator.validate_move(new_board(), 4)

        assert result.is_valid
        assert result.error is None
        assert result.error_message is None

    def test_occupied(self):
        result = self.validator.validate_move(as_board("    X    "), 4)

        assert result.error == MoveError.OCCUPIED_CELL
        assert "occupied by X" in result.error_message

    def test_game_over(self):
        result = self.validator.validate_move(as_board("XXXOO    "), 8)

        assert result.error == MoveError.GAME_OVER

    def test_full_board_without_winner_is_occupied(self):
        result = self.validator.validate_move(as_board("XOXXOOOXX"), 0)

        assert result.error == MoveError.OCCUPIED_CELL

    def test_validate_index(self):
        history = (new_board(), new_board())

        assert self.validator.validate_index(history, 0).is_valid
        assert self.validator.validate_index(history, 1).is_valid
        assert self.validator.validate_index(history, 2).error == MoveError.OUT_OF_RANGE
        assert self.validator.validate_index(history, -1).error == MoveError.OUT_OF_RANGE

    def test_valid_moves(self):
        assert self.validator.get_valid_moves(as_board("XO       ")) == list(range(2, 9))
        assert self.validator.get_valid_moves(as_board("XXXOO    ")) == []
        assert self.validator.get_valid_moves(as_board("XOXXOOOXX")) == []

    def test_boards_are_int8_arrays(self):
        board = as_board("X        ")
        assert isinstance(board, np.ndarray)
        assert board.dtype == np.int8
