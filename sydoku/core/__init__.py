"""Core module for the Sudoku grid, validation and engine errors."""

from .grid import Grid
from .difficulty import Difficulty
from .validator import is_valid_placement, is_valid_board, validate_solution, find_conflicts
from .errors import (
    PuzzleEngineError,
    InvalidMove,
    NoHintAvailable,
    InvalidPuzzleData,
    GenerationInvariantViolation,
)

__all__ = [
    "Grid",
    "Difficulty",
    "is_valid_placement",
    "is_valid_board",
    "validate_solution",
    "find_conflicts",
    "PuzzleEngineError",
    "InvalidMove",
    "NoHintAvailable",
    "InvalidPuzzleData",
    "GenerationInvariantViolation",
]
