"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged), content (mine/number) and the links to
their neighboring cells used by the flood-fill reveal.
"""
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import List


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(eq=False)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells compare by identity. Neighbor links point into the grid owned
    by the board; a cell never owns its neighbors.

    Attributes:
        row: Row index of this cell.
        col: Column index of this cell.
        has_mine: Whether this cell contains a mine.
        is_revealed: Whether this cell has been uncovered.
        is_flagged: Whether the player has flagged this cell.
        adjacent_mine_count: Count of mines in neighboring cells (0-8).
        neighbors: Adjacent cells of the same grid.
    """

    row: int
    col: int
    has_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mine_count: int = 0
    neighbors: List["Cell"] = field(default_factory=list, repr=False)

    def add_neighbor(self, other: "Cell") -> None:
        """
        Link another cell as a neighbor of this one.

        Linking the same cell twice has no effect.
        """
        if other not in self.neighbors:
            self.neighbors.append(other)

    def count_adjacent_mines(self) -> int:
        """
        Recompute the adjacent mine count from the current neighbors.

        Returns:
            The new adjacent mine count.
        """
        self.adjacent_mine_count = sum(
            1 for neighbor in self.neighbors if neighbor.has_mine
        )
        return self.adjacent_mine_count

    def reveal(self) -> bool:
        """
        Reveal this cell, flooding outwards through empty cells.

        A safe cell with no adjacent mines reveals all of its neighbors,
        and so on transitively. Cells that are flagged or already
        revealed stop the flood. A mine is revealed on its own and never
        cascades; ending the game is up to the caller.

        Returns:
            True if this cell was revealed, False if it was already
            revealed or is flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False

        pending = [self]
        while pending:
            cell = pending.pop()
            if cell.is_revealed or cell.is_flagged:
                continue
            cell.is_revealed = True
            if cell.adjacent_mine_count == 0 and not cell.has_mine:
                pending.extend(cell.neighbors)
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    @property
    def state(self) -> CellState:
        """Visual state of the cell."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return self.state == CellState.HIDDEN

    def display_value(self) -> int:
        """
        Convert cell to the numeric value shown by a renderer.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.is_revealed:
            if self.has_mine:
                return MINE_VALUE
            return self.adjacent_mine_count
        if self.is_flagged:
            return FLAGGED_VALUE
        return HIDDEN_VALUE
