"""
Game configuration for TicTacToe with time travel.
All the settings for the board, labels, and debug output.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3, so only the text settings are worth changing.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # Symbols used when printing a board
    EMPTY_SYMBOL = " "
    MARK_SYMBOLS = {
        "X": "X",
        "O": "O",
    }

    # ==================== LABEL SETTINGS ====================
    # History list labels (one per snapshot)
    GAME_START_LABEL = "Go to game start"
    MOVE_LABEL = "Go to move # {number} {mark} = ({row}, {col})"
    CURRENT_MOVE_LABEL = "You are at move # {number} {mark} = ({row}, {col})"
    CORRUPT_MOVE_LABEL = "Unreadable move # {number}"

    # Status line above the board
    WINNER_STATUS = "Winner: {mark}"
    DRAW_STATUS = "Draw"
    NEXT_PLAYER_STATUS = "Next Player: {mark}"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = True
