"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
import time

from ..core.grid import Grid


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    solved: bool = False
    time_seconds: float = 0.0
    nodes_explored: int = 0
    backtracks: int = 0
    solutions_found: int = 0

    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "nodes_explored": self.nodes_explored,
            "backtracks": self.backtracks,
            "solutions_found": self.solutions_found,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, grid: Grid) -> Optional[Grid]:
        """
        Find one completion of a grid.

        The input is never modified. Timing and search counters for the
        run are left in ``self.stats``.

        Returns:
            The solved grid, or None if the grid has no completion.
        """
        solutions = self._timed_search(grid, limit=1)
        self.stats.solved = bool(solutions)
        if not solutions:
            return None
        return Grid.from_list(solutions[0])

    def count_solutions(self, grid: Grid, limit: int = 2) -> int:
        """
        Count completions of a grid, stopping as soon as ``limit`` are found.

        Args:
            grid: The puzzle grid.
            limit: Maximum solutions to count before stopping.

        Returns:
            Number of solutions found (at most limit).
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        solutions = self._timed_search(grid, limit)
        self.stats.solved = bool(solutions)
        return len(solutions)

    def _timed_search(self, grid: Grid, limit: int) -> List[List[int]]:
        self.stats = SolverStats(algorithm=self.name)
        start_time = time.perf_counter()
        solutions = self._search(grid, limit)
        self.stats.time_seconds = time.perf_counter() - start_time
        self.stats.solutions_found = len(solutions)
        return solutions

    @abstractmethod
    def _search(self, grid: Grid, limit: int) -> List[List[int]]:
        """
        Internal search to be implemented by subclasses.

        Args:
            grid: The puzzle (must not be modified).
            limit: Stop once this many solutions are found.

        Returns:
            Up to ``limit`` solutions, each a flat list of 81 ints.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)
