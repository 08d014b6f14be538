"""
Pytest configuration and shared fixtures.
"""
import pytest
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, Game, GameStatus, GameTimer


# ============================================================================
# Helpers
# ============================================================================

def layout_board(
    rows: int, cols: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Build a board with mines at fixed positions, counts computed."""
    mines = list(mines)
    board = Board(BoardConfig(rows, cols, len(mines)))
    for row, col in mines:
        board.get_cell(row, col).place_mine()
    board._calculate_adjacent_mines()
    board.mines_placed = True
    return board


class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StatusRecorder:
    """Observer that records (new, old) status pairs."""

    def __init__(self) -> None:
        self.calls: List[Tuple[GameStatus, GameStatus]] = []

    def __call__(self, new_status: GameStatus, old_status: GameStatus) -> None:
        self.calls.append((new_status, old_status))


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def seeded_board() -> Board:
    """Create a 9x9 board with a fixed random source."""
    return Board(BoardConfig(9, 9, 10), rng=random.Random(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def board_factory() -> Callable[..., Board]:
    """Build boards with mines at fixed positions."""
    return layout_board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    """Create a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def manual_timer(clock: FakeClock) -> GameTimer:
    """Create a timer without a background thread."""
    return GameTimer(interval=None, clock=clock)


@pytest.fixture
def recorder() -> StatusRecorder:
    """Create a status change recorder."""
    return StatusRecorder()


@pytest.fixture
def game(manual_timer: GameTimer, recorder: StatusRecorder) -> Game:
    """Create a beginner game with a manual timer and a recorder."""
    game = Game(recorder, timer=manual_timer, rng=random.Random(42))
    game.new_game("beginner")
    return game


# Mine wall around the top-left corner keeps (0, 0)-(1, 1) out of reach of
# a cascade started anywhere else.
FIXED_MINES = [
    (0, 2), (1, 2), (2, 2), (2, 1), (2, 0),
    (0, 8), (6, 0), (7, 8), (8, 7), (8, 8),
]


@pytest.fixture
def playing_game(game: Game) -> Game:
    """Beginner game on a fixed layout, after a first click at (4, 4)."""
    game.board = layout_board(9, 9, FIXED_MINES)
    game.handle_click(4, 4)
    return game
