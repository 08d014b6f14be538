"""
Game module for Minesweeper.

Wraps one Board per round in a state machine that handles first-click
mine placement, win/loss detection, the round timer and state-change
notifications.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from .board import Board, BoardConfig, BEGINNER, INTERMEDIATE, EXPERT
from .cell import Cell
from .timer import GameTimer

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(str, Enum):
    """Possible states of a round."""

    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    WON = "won"
    LOST = "lost"


class Difficulty(str, Enum):
    """Fixed difficulty presets."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"


DIFFICULTIES: Dict[Difficulty, BoardConfig] = {
    Difficulty.BEGINNER: BEGINNER,
    Difficulty.INTERMEDIATE: INTERMEDIATE,
    Difficulty.EXPERT: EXPERT,
}

StateChangeCallback = Callable[[GameStatus, GameStatus], None]


# ============================================================================
# Result Objects
# ============================================================================

@dataclass
class ClickResult:
    """
    Outcome of a reveal request.

    Attributes:
        revealed: Newly revealed cells, or every mine when the game is lost.
        status: Game status after the request.
        hit_mine: The mine that was clicked, if any.
    """

    revealed: List[Cell] = field(default_factory=list)
    status: GameStatus = GameStatus.NOT_STARTED
    hit_mine: Optional[Cell] = None


@dataclass
class FlagResult:
    """Outcome of a flag toggle. ``cell`` is None when nothing happened."""

    cell: Optional[Cell] = None
    flagged: bool = False


@dataclass
class GameSnapshot:
    """Current game state for a rendering layer."""

    difficulty: Difficulty
    status: GameStatus
    elapsed_time: int
    remaining_mines: int
    board: Optional[Board]


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    Minesweeper game controller.

    Status moves NOT_STARTED -> IN_PROGRESS -> WON or LOST. Only
    ``new_game`` leaves a terminal status. Illegal requests are absorbed
    and answered with an empty result.
    """

    def __init__(
        self,
        on_state_change: Optional[StateChangeCallback] = None,
        timer: Optional[GameTimer] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the game. Call ``new_game`` to create a board.

        Args:
            on_state_change: Optional callback(new_status, old_status).
            timer: Timer for elapsed time. Defaults to a 1-second ticker.
            rng: Random source passed to every new board.
        """
        self.difficulty = Difficulty.BEGINNER
        self.board: Optional[Board] = None
        self.status = GameStatus.NOT_STARTED
        self.on_state_change = on_state_change
        self.timer = timer or GameTimer()
        self._rng = rng

    # ========================================================================
    # Round Management
    # ========================================================================

    def new_game(self, difficulty: Union[Difficulty, str, None] = None) -> None:
        """
        Start a new round.

        Args:
            difficulty: 'beginner', 'intermediate' or 'expert'. None keeps
                the current difficulty.

        Raises:
            ValueError: If the difficulty name is unknown.
        """
        if difficulty is not None:
            difficulty = self._resolve_difficulty(difficulty)

        self.timer.reset()
        if difficulty is not None:
            self.difficulty = difficulty
        self.board = Board(DIFFICULTIES[self.difficulty], rng=self._rng)
        self._set_status(GameStatus.NOT_STARTED)
        logger.debug("New %s game", self.difficulty.value)

    @staticmethod
    def _resolve_difficulty(difficulty: Union[Difficulty, str]) -> Difficulty:
        try:
            return Difficulty(difficulty)
        except ValueError:
            names = ", ".join(d.value for d in Difficulty)
            raise ValueError(
                f"Unknown difficulty {difficulty!r} (expected one of {names})"
            ) from None

    def _set_status(self, new_status: GameStatus) -> None:
        """Set game status and notify the observer on change."""
        old_status = self.status
        if old_status == new_status:
            return
        self.status = new_status
        logger.debug("Status %s -> %s", old_status.value, new_status.value)
        if self.on_state_change:
            self.on_state_change(new_status, old_status)

    def is_game_over(self) -> bool:
        """Check if the round is won or lost."""
        return self.status in (GameStatus.WON, GameStatus.LOST)

    def is_playing(self) -> bool:
        """Check if the round is in progress."""
        return self.status == GameStatus.IN_PROGRESS

    def is_not_started(self) -> bool:
        """Check if the first click is still pending."""
        return self.status == GameStatus.NOT_STARTED

    # ========================================================================
    # Player Actions
    # ========================================================================

    def handle_click(self, row: int, col: int) -> ClickResult:
        """
        Reveal a cell.

        The first click places mines around (row, col) and starts the timer.
        Flagged cells must be unflagged before they can be revealed.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Revealed cells and the resulting status. On a mine hit,
            ``revealed`` holds every mine and ``hit_mine`` the clicked one.
        """
        if self.is_game_over() or self.board is None:
            return ClickResult(status=self.status)

        cell = self.board.get_cell(row, col)
        if cell is None or cell.is_flagged:
            return ClickResult(status=self.status)

        if self.is_not_started():
            self.board.place_mines(row, col)
            self._set_status(GameStatus.IN_PROGRESS)
            self.timer.start()

        revealed = self.board.reveal_cell(row, col)

        if cell.is_mine:
            self.timer.stop()
            self._set_status(GameStatus.LOST)
            mines = self.board.reveal_all_mines()
            return ClickResult(mines, self.status, hit_mine=cell)

        if self.board.count_unrevealed_safe() == 0:
            self.timer.stop()
            self._set_status(GameStatus.WON)

        return ClickResult(revealed, self.status)

    def handle_right_click(self, row: int, col: int) -> FlagResult:
        """
        Toggle the flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            The cell and its new flag state, or an empty result if the
            game is over or the cell is missing or revealed.
        """
        if self.is_game_over() or self.board is None:
            return FlagResult()

        cell = self.board.get_cell(row, col)
        if cell is None or cell.is_revealed:
            return FlagResult()

        return FlagResult(cell, cell.toggle_flag())

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def elapsed_time(self) -> int:
        """Whole seconds since the first click, frozen once the round ends."""
        return self.timer.sample()

    def get_remaining_mines(self) -> int:
        """Get mine count minus flags placed. Negative when over-flagged."""
        if self.board is None:
            return 0
        return DIFFICULTIES[self.difficulty].num_mines - self.board.count_flags()

    def get_state(self) -> GameSnapshot:
        """Get the current game state for display."""
        return GameSnapshot(
            difficulty=self.difficulty,
            status=self.status,
            elapsed_time=self.elapsed_time,
            remaining_mines=self.get_remaining_mines(),
            board=self.board,
        )


def create_game(
    on_state_change: Optional[StateChangeCallback] = None,
    difficulty: Union[Difficulty, str, None] = None,
    **kwargs,
) -> Game:
    """
    Create a game, starting a round if a difficulty is given.

    Extra keyword arguments are passed to ``Game``.
    """
    game = Game(on_state_change, **kwargs)
    if difficulty is not None:
        game.new_game(difficulty)
    return game
