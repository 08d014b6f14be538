"""
Board module for Minesweeper game.

Implements the game board with first-click-safe mine placement,
cascading cell reveal, and the counts the game state machine needs.
"""
import logging
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell

logger = logging.getLogger(__name__)


# ============================================================================
# Configuration
# ============================================================================

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
        return self.rows * self.cols


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns the grid of cells. Mines are placed once, around the first click,
    so that cell and its neighbors are always safe. Win/lose decisions are
    left to the caller, which inspects the counts exposed here.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the board.

        Args:
            config: Board dimensions and mine count. Defaults to beginner.
            rng: Random source for mine placement.
        """
        self.config = config or BEGINNER
        self.rows = self.config.rows
        self.cols = self.config.cols
        self.mine_count = self.config.num_mines
        self.mines_placed = False
        self._rng = rng or random.Random()
        self._grid: List[List[Cell]] = []
        self._init_grid()

    def __repr__(self) -> str:
        return (
            f"Board(rows={self.rows}, cols={self.cols}, "
            f"mine_count={self.mine_count}, mines_placed={self.mines_placed})"
        )

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell(row, col) for col in range(self.cols)]
            for row in range(self.rows)
        ]

    def place_mines(self, safe_row: int, safe_col: int) -> None:
        """
        Place mines randomly, keeping the safe zone mine-free.

        The safe zone is the cell at (safe_row, safe_col) plus its
        neighbors. Positions are drawn uniformly and rejected when they
        fall in the safe zone or already hold a mine. Runs at most once.

        The loop assumes mine_count fits outside the safe zone. If a custom
        board is too dense for that, only the clicked cell is kept safe.

        Args:
            safe_row: Row of the first click.
            safe_col: Column of the first click.
        """
        if self.mines_placed:
            return

        safe_zone = self._get_safe_zone(safe_row, safe_col)
        if self.mine_count > self.config.total_cells - len(safe_zone):
            logger.warning(
                "%d mines do not fit outside the safe zone of a %dx%d board, "
                "only (%d, %d) is kept clear",
                self.mine_count, self.rows, self.cols, safe_row, safe_col,
            )
            safe_zone = {(safe_row, safe_col)}

        placed = 0
        while placed < self.mine_count:
            row = self._rng.randrange(self.rows)
            col = self._rng.randrange(self.cols)
            cell = self._grid[row][col]
            if cell.is_mine or (row, col) in safe_zone:
                continue
            cell.place_mine()
            placed += 1

        self._calculate_adjacent_mines()
        self.mines_placed = True
        logger.debug(
            "Placed %d mines on %dx%d board, safe zone centered on (%d, %d)",
            placed, self.rows, self.cols, safe_row, safe_col,
        )

    def _get_safe_zone(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """Get positions that must stay mine-free on the first click."""
        zone = {cell.position for cell in self.get_neighbors(row, col)}
        if self.is_valid_cell(row, col):
            zone.add((row, col))
        return zone

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for cell in self.cells():
            if not cell.is_mine:
                count = sum(
                    1 for neighbor in self.get_neighbors(cell.row, cell.col)
                    if neighbor.is_mine
                )
                cell.set_adjacent_mines(count)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def get_neighbors(self, row: int, col: int) -> List[Cell]:
        """
        Get valid neighboring cells.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            Up to 8 cells, top-left to bottom-right, skipping the center.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_cell(new_row, new_col):
                    neighbors.append(self._grid[new_row][new_col])
        return neighbors

    def is_valid_cell(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_cell(row, col):
            return None
        return self._grid[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for board_row in self._grid:
            yield from board_row

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_cell(self, row: int, col: int) -> List[Cell]:
        """
        Reveal a cell and cascade through empty regions.

        If the revealed cell has no mine and no adjacent mines, every
        neighbor that is neither revealed nor flagged is revealed too,
        transitively. Mines are never placed here.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Newly revealed cells in reveal order, or an empty list if the
            position is invalid, already revealed or flagged.
        """
        cell = self.get_cell(row, col)
        if cell is None or not cell.reveal():
            return []

        revealed = [cell]
        if cell.is_empty():
            revealed.extend(self._cascade_from(cell))
            logger.debug(
                "Cascade from (%d, %d) revealed %d cells",
                row, col, len(revealed),
            )
        return revealed

    def _cascade_from(self, origin: Cell) -> List[Cell]:
        """Flood-reveal from an empty cell using an explicit stack."""
        revealed = []
        stack = [origin]
        while stack:
            current = stack.pop()
            for neighbor in self.get_neighbors(current.row, current.col):
                # reveal() refuses revealed and flagged cells
                if not neighbor.reveal():
                    continue
                revealed.append(neighbor)
                if neighbor.is_empty():
                    stack.append(neighbor)
        return revealed

    def count_unrevealed_safe(self) -> int:
        """Count cells that are neither revealed nor mines."""
        return sum(
            1 for cell in self.cells()
            if not cell.is_revealed and not cell.is_mine
        )

    def count_flags(self) -> int:
        """Count flagged cells."""
        return sum(1 for cell in self.cells() if cell.is_flagged)

    def reveal_all_mines(self) -> List[Cell]:
        """
        Reveal every mine, flagged or not, for the game-over display.

        Returns:
            All mine cells.
        """
        mines = []
        for cell in self.cells():
            if cell.is_mine:
                cell.is_revealed = True
                mines.append(cell)
        return mines

    def wrong_flags(self) -> List[Cell]:
        """Get flagged cells that do not hold a mine."""
        return [
            cell for cell in self.cells()
            if cell.is_flagged and not cell.is_mine
        ]

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (rows, cols) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs
