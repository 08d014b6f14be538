"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(eq=False)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index, fixed at creation.
        col: Column index, fixed at creation.
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the cell has been uncovered.
        is_flagged: Whether the player has flagged this cell.
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    row: int = 0
    col: int = 0
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0

    def place_mine(self) -> None:
        """Place a mine in this cell."""
        self.is_mine = True

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            The flag state after the call. A revealed cell keeps its
            current flag state.
        """
        if self.is_revealed:
            return self.is_flagged
        self.is_flagged = not self.is_flagged
        return self.is_flagged

    def set_adjacent_mines(self, count: int) -> None:
        """Set the adjacent mine count."""
        self.adjacent_mines = count

    def is_empty(self) -> bool:
        """Check if cell has no mine and no adjacent mines."""
        return not self.is_mine and self.adjacent_mines == 0

    @property
    def position(self) -> Tuple[int, int]:
        """Get (row, col) of this cell."""
        return self.row, self.col

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    @property
    def state(self) -> CellState:
        """Get the visual state. A force-revealed flagged mine is REVEALED."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to a compact integer for board snapshots.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        state = self.state
        if state == CellState.HIDDEN:
            return -1
        if state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
