"""
Board module for Minesweeper game.

Implements the game board with mine placement, neighbor linking,
adjacency counting, and win detection.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np

from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    AWAITING_INPUT = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.total_cells - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}

_SHORTCUTS = {"e": "beginner", "m": "intermediate", "h": "expert"}


def get_difficulty(name: str) -> BoardConfig:
    """
    Look up a preset by name or single-key shortcut.

    Args:
        name: "beginner", "intermediate", "expert", or "e", "m", "h".

    Returns:
        The matching preset configuration.
    """
    key = name.strip().lower()
    key = _SHORTCUTS.get(key, key)
    if key not in DIFFICULTIES:
        raise ValueError(f"Unknown difficulty: {name!r}")
    return DIFFICULTIES[key]


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells, places mines, links neighbors and tracks
    whether the game is over. A fresh layout is generated on creation
    and on every reset.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    grid: List[List[Cell]] = field(default_factory=list, repr=False)
    game_over: bool = False
    safe_tiles_remaining: int = 0
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Generate the first layout after dataclass creation."""
        self._rng = random.Random(self.seed)
        self.reset()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of fresh cells."""
        self.grid = [
            [Cell(row, col) for col in range(self.cols)]
            for row in range(self.rows)
        ]

    def _place_mines(self) -> None:
        """Place mines at random until the configured count is reached."""
        placed = 0
        while placed < self.config.num_mines:
            row = self._rng.randrange(self.rows)
            col = self._rng.randrange(self.cols)
            cell = self.grid[row][col]
            if not cell.has_mine:
                cell.has_mine = True
                placed += 1

    def _link_neighbors(self) -> None:
        """Link every cell to its adjacent cells."""
        for row in range(self.rows):
            for col in range(self.cols):
                cell = self.grid[row][col]
                for neighbor_row, neighbor_col in self._get_neighbors(row, col):
                    cell.add_neighbor(self.grid[neighbor_row][neighbor_col])

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in self.grid:
            for cell in row:
                cell.count_adjacent_mines()

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    # ========================================================================
    # Game Setup (Mid-level)
    # ========================================================================

    def reset(self) -> None:
        """Replace every cell and generate a new layout."""
        self._init_grid()
        self.game_over = False
        self._place_mines()
        self._link_neighbors()
        self._calculate_adjacent_mines()
        self.safe_tiles_remaining = self.config.safe_cells

    def change_difficulty(self, config: BoardConfig) -> None:
        """Switch to a new configuration and start a new game."""
        self.config = config
        self.reset()

    def count_remaining_safe_tiles(self) -> int:
        """Count safe cells that have not been revealed yet."""
        return sum(
            1 for row in self.grid for cell in row
            if not cell.has_mine and not cell.is_revealed
        )

    def count_flags(self) -> int:
        """Count flagged cells."""
        return sum(1 for row in self.grid for cell in row if cell.is_flagged)

    def check_win(self) -> bool:
        """
        End the game if every safe cell has been revealed.

        Leaves the board untouched otherwise.

        Returns:
            True if all safe cells are revealed.
        """
        for row in self.grid:
            for cell in row:
                if not cell.has_mine and not cell.is_revealed:
                    return False
        self.game_over = True
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self.config.rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self.config.cols

    @property
    def total_mines(self) -> int:
        """Number of mines on the board."""
        return self.config.num_mines

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self.game_over:
            return GameState.GAME_OVER
        return GameState.AWAITING_INPUT

    @property
    def is_lost(self) -> bool:
        """Check if a mine has been revealed."""
        return any(
            cell.has_mine and cell.is_revealed
            for row in self.grid for cell in row
        )

    @property
    def is_won(self) -> bool:
        """Check if the game ended without revealing a mine."""
        return self.game_over and not self.is_lost

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self.grid[row][col]

    def snapshot(self) -> np.ndarray:
        """
        Get board state as numpy array for renderers.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        view = np.zeros((self.rows, self.cols), dtype=np.int8)
        for row in range(self.rows):
            for col in range(self.cols):
                view[row, col] = self.grid[row][col].display_value()
        return view


def new_board(
    rows: int, cols: int, mine_count: int, seed: Optional[int] = None
) -> Board:
    """Create a board with the given dimensions and mine count."""
    return Board(BoardConfig(rows, cols, mine_count), seed=seed)
