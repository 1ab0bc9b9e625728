"""Generator module for creating Sudoku puzzles."""

from ..core.difficulty import Difficulty
from .daily import DailyRandom, daily_seed, date_string, parse_date
from .generator import PuzzleGenerator, generate_puzzle, generate_solved, MAX_GENERATION_ATTEMPTS

__all__ = [
    "Difficulty",
    "DailyRandom",
    "daily_seed",
    "date_string",
    "parse_date",
    "PuzzleGenerator",
    "generate_puzzle",
    "generate_solved",
    "MAX_GENERATION_ATTEMPTS",
]
