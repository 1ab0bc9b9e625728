"""Difficulty levels and their fixed clue counts."""

from __future__ import annotations
from enum import Enum


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def clue_count(self) -> int:
        """Target number of clues left in a generated puzzle."""
        counts = {
            Difficulty.EASY: 46,
            Difficulty.MEDIUM: 36,
            Difficulty.HARD: 29,
        }
        return counts[self]

    @property
    def cells_to_remove(self) -> int:
        """Number of cells emptied from the solved grid at this level."""
        return 81 - self.clue_count

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def daily_multiplier(self) -> int:
        """Prime that keeps daily seeds distinct between difficulties."""
        multipliers = {
            Difficulty.EASY: 1,
            Difficulty.MEDIUM: 7919,
            Difficulty.HARD: 15737,
        }
        return multipliers[self]

    @classmethod
    def from_clue_count(cls, clues: int) -> Difficulty:
        """Classify an imported puzzle by how many clues it has."""
        if clues >= cls.EASY.clue_count:
            return cls.EASY
        if clues >= cls.MEDIUM.clue_count:
            return cls.MEDIUM
        return cls.HARD
