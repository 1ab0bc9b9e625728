"""Backtracking solver with the minimum-remaining-values heuristic."""

from __future__ import annotations
from typing import List, Optional

from .base_solver import BaseSolver
from ..core.grid import Grid, NUM_CELLS, SIZE

# Digit d is bit d, so bits 1..9 are used
ALL_DIGITS = 0b1111111110
BOX_OF = [(i // 27) * 3 + (i % 9) // 3 for i in range(NUM_CELLS)]
POPCOUNT = [bin(m).count("1") for m in range(1 << 10)]


class BacktrackingSolver(BaseSolver):
    """
    Depth-first search over empty cells.

    Features:
    - Minimum Remaining Values (MRV) heuristic for cell selection
    - Row-major tie-break, so the search order depends only on the grid
    - Per-unit bitmasks instead of rescanning rows, columns and boxes
    - Early stop once the requested number of solutions is reached
    """

    name = "Backtracking+MRV"

    def _search(self, grid: Grid, limit: int) -> List[List[int]]:
        cells = grid.to_list()
        rows = [0] * SIZE
        cols = [0] * SIZE
        boxes = [0] * SIZE

        for idx, digit in enumerate(cells):
            if digit == 0:
                continue
            r, c, b = idx // SIZE, idx % SIZE, BOX_OF[idx]
            bit = 1 << digit
            if (rows[r] | cols[c] | boxes[b]) & bit:
                # Clashing givens, nothing to search
                return []
            rows[r] |= bit
            cols[c] |= bit
            boxes[b] |= bit

        solutions: List[List[int]] = []
        self._backtrack(cells, rows, cols, boxes, limit, solutions)
        return solutions

    def _backtrack(self, cells, rows, cols, boxes, limit, solutions) -> bool:
        """
        Recursive backtracking step.

        Returns True once ``limit`` solutions have been collected.
        """
        self.stats.nodes_explored += 1

        best = self._select_cell(cells, rows, cols, boxes)
        if best is None:
            solutions.append(list(cells))
            return len(solutions) >= limit

        r, c, b = best // SIZE, best % SIZE, BOX_OF[best]
        mask = ALL_DIGITS & ~(rows[r] | cols[c] | boxes[b])

        for digit in range(1, SIZE + 1):
            bit = 1 << digit
            if not mask & bit:
                continue
            cells[best] = digit
            rows[r] |= bit
            cols[c] |= bit
            boxes[b] |= bit

            done = self._backtrack(cells, rows, cols, boxes, limit, solutions)

            cells[best] = 0
            rows[r] &= ~bit
            cols[c] &= ~bit
            boxes[b] &= ~bit
            if done:
                return True

        self.stats.backtracks += 1
        return False

    @staticmethod
    def _select_cell(cells, rows, cols, boxes) -> Optional[int]:
        """
        Pick the empty cell with the fewest candidates.

        The first minimum in row-major order wins. A cell with zero
        candidates is returned immediately so the caller fails fast.
        """
        best = None
        best_count = SIZE + 1
        for idx in range(NUM_CELLS):
            if cells[idx]:
                continue
            r, c = idx // SIZE, idx % SIZE
            count = POPCOUNT[ALL_DIGITS & ~(rows[r] | cols[c] | boxes[BOX_OF[idx]])]
            if count < best_count:
                best, best_count = idx, count
                if count <= 1:
                    break
        return best


def solve(grid: Grid) -> Optional[Grid]:
    """Return one completion of ``grid`` or None if it has none."""
    return BacktrackingSolver().solve(grid)


def count_solutions(grid: Grid, limit: int = 2) -> int:
    """Count completions of ``grid`` up to ``limit``."""
    return BacktrackingSolver().count_solutions(grid, limit)


def has_unique_solution(grid: Grid) -> bool:
    """
    Check if a puzzle has exactly one solution.

    Stops searching as soon as a second solution turns up.
    """
    return count_solutions(grid, limit=2) == 1
