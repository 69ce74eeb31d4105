"""
Minesweeper game module.

Provides core game logic including board management, cell state,
player actions and a terminal front-end.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    GameState,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    get_difficulty,
    new_board,
)
from .actions import ActionResult, reveal_cell, toggle_flag

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "get_difficulty",
    "new_board",
    "ActionResult",
    "reveal_cell",
    "toggle_flag",
]
