"""
Terminal front-end for Minesweeper.

Paints a board as text and runs a simple read-eval-print loop over
the player actions. Holds no game rules of its own.
"""
from typing import Callable, Tuple

from .actions import ActionResult, reveal_cell, toggle_flag
from .board import Board
from .cell import FLAGGED_VALUE, HIDDEN_VALUE, MINE_VALUE


# ============================================================================
# Constants
# ============================================================================

RESET = "\u001b[0m"

NUMBER_COLORS = {
    0: "\u001b[30m",  # black
    1: "\u001b[32m",  # green
    2: "\u001b[34m",  # blue
    3: "\u001b[36m",  # cyan
    4: "\u001b[33m",  # yellow
    5: "\u001b[31m",  # red
    6: "\u001b[35m",  # purple
    7: "\u001b[37m",  # white
    8: "\u001b[37m",  # white
}

PROMPT = "Enter row, col, action (r=Reveal, f=Flag): "

REVEAL_ACTION = "r"
FLAG_ACTION = "f"


# ============================================================================
# Rendering
# ============================================================================

def color_for_number(count: int) -> str:
    """Get the ANSI color code for an adjacent mine count."""
    return NUMBER_COLORS.get(count, RESET)


def render_board(board: Board, color: bool = True) -> str:
    """
    Render board as text, one line per row.

    Args:
        board: Board to render.
        color: Wrap revealed counts in ANSI color codes.

    Returns:
        The rendered board.
    """
    lines = []
    view = board.snapshot()

    for row in range(board.rows):
        symbols = []
        for col in range(board.cols):
            val = int(view[row, col])
            if val == FLAGGED_VALUE:
                symbols.append("F")
            elif val == HIDDEN_VALUE:
                symbols.append("?")
            elif val == MINE_VALUE:
                symbols.append("*")
            elif color:
                symbols.append(f"{color_for_number(val)}{val}{RESET}")
            else:
                symbols.append(str(val))
        lines.append(" ".join(symbols))

    return "\n".join(lines)


def status_line(board: Board) -> str:
    """Summarize mines, flags and progress for display under the board."""
    return (
        f"Mines: {board.total_mines}  "
        f"Flags: {board.count_flags()}  "
        f"Safe Tiles Left: {board.safe_tiles_remaining}"
    )


# ============================================================================
# Input Handling
# ============================================================================

def parse_command(text: str) -> Tuple[int, int, str]:
    """
    Parse a "row col action" command.

    Args:
        text: Raw line typed by the player.

    Returns:
        Tuple of (row, col, action) with action lower-cased.
    """
    parts = text.split()
    if len(parts) != 3:
        raise ValueError("Expected: row col action")
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError("Row and column must be whole numbers") from None
    return row, col, parts[2].lower()


def play(
    board: Board,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    color: bool = True,
) -> None:
    """
    Play one game on the terminal until it is over or input runs out.

    Args:
        board: Board to play on.
        read: Prompting reader, defaults to input().
        write: Line writer, defaults to print().
        color: Render counts with ANSI colors.
    """
    while not board.game_over:
        write("")
        write(render_board(board, color))
        write(status_line(board))
        try:
            line = read(PROMPT)
        except EOFError:
            return

        try:
            row, col, action = parse_command(line)
        except ValueError as err:
            write(str(err))
            continue

        if action == REVEAL_ACTION:
            result = reveal_cell(board, row, col)
        elif action == FLAG_ACTION:
            result = toggle_flag(board, row, col)
        else:
            write("Unknown action, use 'r' to reveal or 'f' to flag.")
            continue

        if result == ActionResult.REJECTED:
            write("Invalid coordinates, try again.")
        elif result == ActionResult.HIT_MINE:
            write("Boom! You hit a mine. Game over.")
        elif result == ActionResult.WON:
            write("Congratulations! You cleared the board.")

    write("")
    write(render_board(board, color))
