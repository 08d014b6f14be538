"""
Minesweeper rules engine.

Provides the cell and board model, first-click-safe mine placement,
cascading reveal, and the game state machine that drives a round.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, BEGINNER, INTERMEDIATE, EXPERT
from .timer import GameTimer
from .game import (
    DIFFICULTIES,
    ClickResult,
    Difficulty,
    FlagResult,
    Game,
    GameSnapshot,
    GameStatus,
    create_game,
)

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "GameTimer",
    "DIFFICULTIES",
    "ClickResult",
    "Difficulty",
    "FlagResult",
    "Game",
    "GameSnapshot",
    "GameStatus",
    "create_game",
]
