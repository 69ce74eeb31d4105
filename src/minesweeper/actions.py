"""
Player actions for a Minesweeper board.

Front-ends call these on user input. Coordinates are bounds-checked
here so a bad click is rejected instead of raising.
"""
from enum import Enum, auto

from .board import Board


class ActionResult(Enum):
    """Outcome of a single player action."""

    REJECTED = auto()
    NO_CHANGE = auto()
    REVEALED = auto()
    HIT_MINE = auto()
    WON = auto()
    FLAGGED = auto()
    UNFLAGGED = auto()


def reveal_cell(board: Board, row: int, col: int) -> ActionResult:
    """
    Reveal the cell at (row, col).

    A mine ends the game immediately without cascading. A safe cell
    floods outwards through empty neighbors, after which the board is
    checked for a win.

    Args:
        board: Board to act on.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        The outcome of the reveal.
    """
    if board.game_over or not board.in_bounds(row, col):
        return ActionResult.REJECTED

    cell = board.grid[row][col]
    if cell.is_revealed or cell.is_flagged:
        return ActionResult.NO_CHANGE

    if cell.has_mine:
        cell.is_revealed = True
        board.game_over = True
        return ActionResult.HIT_MINE

    cell.reveal()
    board.safe_tiles_remaining = board.count_remaining_safe_tiles()
    if board.check_win():
        return ActionResult.WON
    return ActionResult.REVEALED


def toggle_flag(board: Board, row: int, col: int) -> ActionResult:
    """Toggle the flag on the cell at (row, col)."""
    if board.game_over or not board.in_bounds(row, col):
        return ActionResult.REJECTED

    cell = board.grid[row][col]
    if not cell.toggle_flag():
        return ActionResult.NO_CHANGE
    if cell.is_flagged:
        return ActionResult.FLAGGED
    return ActionResult.UNFLAGGED
