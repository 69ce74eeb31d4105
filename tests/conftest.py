"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Helpers
# ============================================================================

def plant_mines(
    rows: int, cols: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Create a board whose mines sit exactly at the given positions."""
    positions = set(mines)
    board = Board(BoardConfig(rows, cols, len(positions)), seed=0)
    for row in board.grid:
        for cell in row:
            cell.has_mine = (cell.row, cell.col) in positions
    for row in board.grid:
        for cell in row:
            cell.count_adjacent_mines()
    return board


def count_mines(board: Board) -> int:
    """Count cells holding a mine."""
    return sum(1 for row in board.grid for cell in row if cell.has_mine)


def scripted_input(lines: List[str]) -> Callable[[str], str]:
    """Build a reader that replays lines, then signals end of input."""
    remaining = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return read


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(seed=1234)


@pytest.fixture
def small_board() -> Board:
    """Create a small 3x3 board with 2 mines."""
    return Board(BoardConfig(3, 3, 2), seed=7)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def strip_board() -> Board:
    """
    Create a 1x5 board with a single mine in the middle.

    Layout (counts): 0 1 * 1 0
    """
    return plant_mines(1, 5, [(0, 2)])


@pytest.fixture
def corner_board() -> Board:
    """
    Create a 3x5 board with a single mine in the top right corner.

    Layout (counts):
        0 0 0 1 *
        0 0 0 1 1
        0 0 0 0 0
    """
    return plant_mines(3, 5, [(0, 4)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, has_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
