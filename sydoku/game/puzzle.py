"""An immutable puzzle: clues, their unique solution and metadata."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..core.grid import Grid
from ..core.errors import InvalidPuzzleData
from ..core.validator import validate_solution
from ..core.difficulty import Difficulty
from ..solvers.backtracking_solver import BacktrackingSolver


@dataclass(frozen=True)
class Puzzle:
    """
    A generated or imported puzzle.

    ``initial`` and ``solution`` are private read-only copies; writing to
    them raises. Use ``.copy()`` to get a mutable grid.
    """
    initial: Grid
    solution: Grid
    difficulty: Difficulty
    daily_seed: Optional[str] = None

    def __post_init__(self):
        for name in ("initial", "solution"):
            frozen = getattr(self, name).copy()
            frozen.grid.flags.writeable = False
            object.__setattr__(self, name, frozen)

    @property
    def clue_count(self) -> int:
        return self.initial.count_filled()

    @property
    def is_daily(self) -> bool:
        return self.daily_seed is not None

    def is_clue(self, row: int, col: int) -> bool:
        """True if (row, col) was pre-filled by the puzzle."""
        return self.initial.get(row, col) != 0

    def answer(self, row: int, col: int) -> int:
        """The solution digit at (row, col)."""
        return self.solution.get(row, col)

    def to_code(self) -> str:
        """81-digit share code of the clue grid."""
        return self.initial.to_string()

    @classmethod
    def from_code(cls, code: str, difficulty: Optional[Difficulty] = None) -> Puzzle:
        """
        Build a puzzle from an 81-digit share code.

        The code is solved to recover the solution. Codes that are malformed,
        unsolvable or have more than one solution are rejected.

        Raises:
            InvalidPuzzleData: If the code does not describe a proper puzzle.
        """
        code = code.strip()
        if len(code) != 81 or not all(ch in "0123456789" for ch in code):
            raise InvalidPuzzleData("Puzzle code must be 81 digits 0-9")

        return cls.validated(Grid.from_string(code), None, difficulty)

    @classmethod
    def validated(
        cls,
        initial: Grid,
        solution: Optional[Grid],
        difficulty: Optional[Difficulty] = None,
        daily_seed: Optional[str] = None,
    ) -> Puzzle:
        """
        Construct a puzzle after re-checking every puzzle invariant.

        When ``solution`` is None it is computed from ``initial``.

        Raises:
            InvalidPuzzleData: If the clues clash, have no unique completion,
                or disagree with the given solution.
        """
        if not initial.is_valid():
            raise InvalidPuzzleData("Clue grid repeats a digit within a unit")

        solver = BacktrackingSolver()
        if solver.count_solutions(initial, limit=2) != 1:
            raise InvalidPuzzleData("Clue grid does not have exactly one solution")

        if solution is None:
            solution = solver.solve(initial)
        elif not validate_solution(initial, solution):
            raise InvalidPuzzleData("Solution is incomplete or contradicts the clues")

        if difficulty is None:
            difficulty = Difficulty.from_clue_count(initial.count_filled())

        return cls(initial, solution, difficulty, daily_seed)
