"""
Console driver for TicTacToe with time travel.

Replays scripted moves or reads them from the keyboard, and prints the
board, the status line, and the move history after every action.

Commands in interactive mode:
    0-8     place the next mark on that cell
    j N     jump to history entry N
    r       reset the game
    q       quit
"""

import sys
from typing import List, Optional

from game_logic.config import GameConfig
from game_logic.game_history import GameHistory
from game_logic.game_state import format_board
from game_logic.view import build_view


def print_view(game: GameHistory):
    """Print the board, status, and history list."""
    view = build_view(game.history, game.cursor)

    print()
    print(format_board(view.board, highlight=view.winning_line))
    print(f"\n{view.status_text}")
    print("\nHistory:")
    for entry in view.entries:
        marker = ">" if entry.is_current else " "
        print(f" {marker} {entry.index}. {entry.label}")


def handle_command(game: GameHistory, command: str) -> bool:
    """
    Run one interactive command.

    Returns:
        False when the user asked to quit, True otherwise.
    """
    parts = command.strip().lower().split()
    if not parts:
        return True

    if parts[0] == "q":
        return False

    if parts[0] == "r":
        game.reset()
        print("Game reset!")
    elif parts[0] == "j" and len(parts) == 2 and parts[1].isdigit():
        game.jump(int(parts[1]))
    elif parts[0].isdigit():
        game.play(int(parts[0]))
    else:
        print(f"Unknown command: {command.strip()!r}")
        return True

    print_view(game)
    return True


def replay(game: GameHistory, moves: List[int], jump: Optional[int] = None) -> bool:
    """
    Play scripted moves in order, then optionally jump.

    Returns:
        True if every action was accepted.
    """
    for cell_index in moves:
        if not game.play(cell_index).is_valid:
            return False

    if jump is not None and not game.jump(jump).is_valid:
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with time travel")
    parser.add_argument(
        "--moves",
        type=int,
        nargs="+",
        metavar="CELL",
        help="Cells (0-8) to play in order, then exit"
    )
    parser.add_argument(
        "--jump",
        type=int,
        metavar="INDEX",
        help="History entry to jump to after the scripted moves"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Don't print warnings for rejected actions"
    )

    args = parser.parse_args(argv)

    if args.quiet:
        GameConfig.DEBUG_MODE = False

    game = GameHistory()

    # Scripted mode
    if args.moves is not None or args.jump is not None:
        ok = replay(game, args.moves or [], args.jump)
        print_view(game)
        return 0 if ok else 1

    # Interactive mode
    print("Cells are numbered row by row:\n0|1|2\n3|4|5\n6|7|8")
    print("Type a cell, 'j N' to jump, 'r' to reset, 'q' to quit.")
    print_view(game)

    try:
        while True:
            if not handle_command(game, input("\n> ")):
                break
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
