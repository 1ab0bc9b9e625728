"""Validation utilities for Sudoku grids."""

from __future__ import annotations
from typing import Set, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import Grid


def is_valid_placement(grid: Grid, row: int, col: int, digit: int) -> bool:
    """
    Check if placing a digit at (row, col) keeps the grid legal.

    The cell's own current value is ignored, so this also answers
    "could this cell hold digit instead".

    Args:
        grid: The Sudoku grid.
        row: Row index.
        col: Column index.
        digit: Digit to check (1 to 9).

    Returns:
        True if no peer already holds the digit.
    """
    if digit < 1 or digit > 9:
        return False
    return all(grid.get(r, c) != digit for r, c in grid.peers(row, col))


def is_valid_board(grid: Grid) -> bool:
    """
    Check if the entire grid state is valid (no conflicts).

    Args:
        grid: The Sudoku grid to validate.

    Returns:
        True if no constraints are violated.
    """
    return grid.is_valid()


def find_conflicts(grid: Grid) -> Set[Tuple[int, int]]:
    """
    Find every cell whose digit repeats within its row, column or box.

    Both cells of a clashing pair are reported. Empty cells never conflict.

    Returns:
        Set of (row, col) positions, empty for a conflict-free grid.
    """
    conflicts = set()
    for row in range(9):
        for col in range(9):
            digit = grid.get(row, col)
            if digit == 0:
                continue
            for r, c in grid.peers(row, col):
                if grid.get(r, c) == digit:
                    conflicts.add((row, col))
                    conflicts.add((r, c))
    return conflicts


def validate_solution(puzzle: Grid, solution: Grid) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The clue grid.
        solution: The proposed solution.

    Returns:
        True if solution is complete and valid and matches every clue.
    """
    for row in range(9):
        for col in range(9):
            clue = puzzle.get(row, col)
            if clue != 0 and clue != solution.get(row, col):
                return False

    return solution.is_solved()
