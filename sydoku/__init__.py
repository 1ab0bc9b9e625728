"""Sudoku puzzle engine: generation, daily challenges, moves and hints."""

from .core import Grid, Difficulty
from .core.errors import (
    PuzzleEngineError,
    InvalidMove,
    NoHintAvailable,
    InvalidPuzzleData,
    GenerationInvariantViolation,
)
from .solvers import solve, count_solutions, has_unique_solution
from .generator import PuzzleGenerator, generate_puzzle, generate_solved
from .game import Puzzle, PlayState, HintLevel, Hint, get_hint

__version__ = "1.0.0"

__all__ = [
    "Grid",
    "Difficulty",
    "PuzzleEngineError",
    "InvalidMove",
    "NoHintAvailable",
    "InvalidPuzzleData",
    "GenerationInvariantViolation",
    "solve",
    "count_solutions",
    "has_unique_solution",
    "PuzzleGenerator",
    "generate_puzzle",
    "generate_solved",
    "Puzzle",
    "PlayState",
    "HintLevel",
    "Hint",
    "get_hint",
]
