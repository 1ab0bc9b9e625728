"""Sudoku puzzle generator with fixed clue counts and daily seeding."""

from __future__ import annotations
import logging
import random
from typing import List, Optional

from ..core.grid import Grid, NUM_CELLS, SIZE, DIGITS
from ..core.difficulty import Difficulty
from ..core.errors import GenerationInvariantViolation
from ..game.puzzle import Puzzle
from ..solvers.backtracking_solver import BacktrackingSolver, BOX_OF
from .daily import DailyRandom, DateLike, daily_seed, date_string

logger = logging.getLogger(__name__)

MAX_GENERATION_ATTEMPTS = 3


class PuzzleGenerator:
    """
    Generator for Sudoku puzzles with a provably unique solution.

    Algorithm:
    1. Fill an empty grid by randomized backtracking
    2. Visit every cell once in shuffled order and empty it
    3. Keep the removal only if the solver still finds exactly one solution
    4. Stop at the difficulty's clue count or when no cell can be removed
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility.
            rng: Random source to draw from. Mutually exclusive with seed.
        """
        if seed is not None and rng is not None:
            raise ValueError("Pass either seed or rng, not both")
        self.rng = rng if rng is not None else random.Random(seed)
        self.solver = BacktrackingSolver()

    def generate_solved(self) -> Grid:
        """
        Generate a complete valid grid using randomized backtracking.

        Raises:
            GenerationInvariantViolation: If the search is exhausted, which
                cannot happen for an empty 9x9 grid without a defect.
        """
        cells = [0] * NUM_CELLS
        rows = [0] * SIZE
        cols = [0] * SIZE
        boxes = [0] * SIZE
        if not self._fill(cells, rows, cols, boxes, 0):
            raise GenerationInvariantViolation("Randomized fill exhausted every branch")
        return Grid.from_list(cells)

    def _fill(self, cells, rows, cols, boxes, idx: int) -> bool:
        """Fill cells from ``idx`` onwards in row-major order."""
        if idx == NUM_CELLS:
            return True

        r, c, b = idx // SIZE, idx % SIZE, BOX_OF[idx]
        digits = list(DIGITS)
        self.rng.shuffle(digits)

        for digit in digits:
            bit = 1 << digit
            if (rows[r] | cols[c] | boxes[b]) & bit:
                continue
            cells[idx] = digit
            rows[r] |= bit
            cols[c] |= bit
            boxes[b] |= bit

            if self._fill(cells, rows, cols, boxes, idx + 1):
                return True

            cells[idx] = 0
            rows[r] &= ~bit
            cols[c] &= ~bit
            boxes[b] &= ~bit

        return False

    def generate_puzzle(
        self,
        difficulty: Difficulty = Difficulty.MEDIUM,
        date_seed: Optional[DateLike] = None,
    ) -> Puzzle:
        """
        Generate a puzzle along with its solution.

        Args:
            difficulty: Desired difficulty level.
            date_seed: Calendar date of a daily challenge. When given, the
                generator's own random source is ignored and the puzzle is
                a pure function of the date and difficulty.

        Returns:
            A Puzzle whose clue grid has exactly one completion.
        """
        if date_seed is not None:
            daily = PuzzleGenerator(rng=DailyRandom(daily_seed(date_seed, difficulty)))
            return daily._build(difficulty, date_string(date_seed))
        return self._build(difficulty, None)

    def generate_batch(self, count: int, difficulty: Difficulty = Difficulty.MEDIUM) -> List[Puzzle]:
        """
        Generate multiple puzzles of the same difficulty.

        Args:
            count: Number of puzzles to generate.
            difficulty: Desired difficulty level.

        Returns:
            List of Puzzles.
        """
        return [self.generate_puzzle(difficulty) for _ in range(count)]

    def _build(self, difficulty: Difficulty, daily: Optional[str]) -> Puzzle:
        for attempt in range(1, MAX_GENERATION_ATTEMPTS + 1):
            try:
                solution = self.generate_solved()
                break
            except GenerationInvariantViolation:
                logger.error("Solved grid generation failed (attempt %d/%d)",
                             attempt, MAX_GENERATION_ATTEMPTS)
                if attempt == MAX_GENERATION_ATTEMPTS:
                    raise

        initial = self._remove_cells(solution, difficulty)
        logger.debug("Generated %s puzzle with %d clues (target %d)",
                     difficulty.value, initial.count_filled(), difficulty.clue_count)
        return Puzzle(initial, solution, difficulty, daily)

    def _remove_cells(self, solution: Grid, difficulty: Difficulty) -> Grid:
        """
        Remove cells from a complete solution to create a puzzle.

        Emptying cells never removes solutions, so a cell that once broke
        uniqueness stays unremovable and a single pass over all cells finds
        every removable one.
        """
        puzzle = solution.copy()
        positions = [(row, col) for row in range(SIZE) for col in range(SIZE)]
        self.rng.shuffle(positions)

        clues = NUM_CELLS
        for row, col in positions:
            if clues <= difficulty.clue_count:
                break

            digit = puzzle.get(row, col)
            puzzle.set(row, col, 0)

            if self.solver.count_solutions(puzzle, limit=2) == 1:
                clues -= 1
            else:
                puzzle.set(row, col, digit)

        return puzzle


def generate_solved(rng: Optional[random.Random] = None) -> Grid:
    """Fill an empty grid using ``rng`` (fresh entropy when omitted)."""
    return PuzzleGenerator(rng=rng).generate_solved()


def generate_puzzle(
    difficulty: Difficulty = Difficulty.MEDIUM,
    date_seed: Optional[DateLike] = None,
    rng: Optional[random.Random] = None,
) -> Puzzle:
    """
    Generate a new puzzle, or the daily puzzle for ``date_seed``.

    Example:
        >>> puzzle = generate_puzzle(Difficulty.EASY, date_seed="2024-01-01")
        >>> puzzle.daily_seed
        '2024-01-01'
    """
    return PuzzleGenerator(rng=rng).generate_puzzle(difficulty, date_seed=date_seed)
