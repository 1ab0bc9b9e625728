"""Unit tests for the backtracking solver."""

import pytest
from sydoku.core.grid import Grid
from sydoku.solvers import BacktrackingSolver, solve, count_solutions, has_unique_solution

from sample_puzzles import TEST_PUZZLE, TEST_SOLUTION


class TestBacktrackingSolver:
    """Tests for the MRV backtracking solver."""

    def test_solve_puzzle(self):
        """Test solving a known puzzle."""
        grid = Grid.from_string(TEST_PUZZLE)
        solution = solve(grid)

        assert solution is not None
        assert solution.is_solved()
        assert solution.to_string() == TEST_SOLUTION

    def test_input_not_modified(self):
        """The solver works on its own copy."""
        grid = Grid.from_string(TEST_PUZZLE)
        solve(grid)
        assert grid.to_string() == TEST_PUZZLE

    def test_stats_collected(self):
        """Test that stats are collected."""
        solver = BacktrackingSolver()
        solver.solve(Grid.from_string(TEST_PUZZLE))

        assert solver.stats.solved
        assert solver.stats.nodes_explored > 0
        assert solver.stats.solutions_found == 1
        assert solver.stats.time_seconds >= 0

    def test_solve_empty_grid_is_deterministic(self):
        """Index-order tie-breaking makes repeated searches identical."""
        first = solve(Grid())
        second = solve(Grid())
        assert first.is_solved()
        assert first == second

    def test_unsolvable(self):
        """A grid with clashing clues has no solution."""
        grid = Grid()
        grid.set(0, 0, 1)
        grid.set(0, 1, 1)
        assert solve(grid) is None
        assert count_solutions(grid, limit=2) == 0

    def test_dead_end_without_clash(self):
        """No direct clash, but (0, 8) has no candidate left."""
        grid = Grid()
        for col, digit in enumerate(range(1, 9)):
            grid.set(0, col, digit)
        grid.set(1, 8, 9)
        assert solve(grid) is None


class TestCountSolutions:
    """Tests for uniqueness checking."""

    def test_unique_puzzle(self):
        """The known puzzle has exactly one solution."""
        grid = Grid.from_string(TEST_PUZZLE)
        assert count_solutions(grid, limit=2) == 1
        assert has_unique_solution(grid)

    def test_stops_at_limit(self):
        """An empty grid has billions of solutions; counting stops at the limit."""
        solver = BacktrackingSolver()
        assert solver.count_solutions(Grid(), limit=2) == 2
        assert solver.count_solutions(Grid(), limit=5) == 5
        assert not has_unique_solution(Grid())

    def test_two_solutions(self):
        """Emptying a swappable 6/7 rectangle leaves exactly two completions."""
        grid = Grid.from_string(TEST_SOLUTION)
        rectangle = [(0, 3), (0, 4), (3, 3), (3, 4)]
        assert [grid.get(r, c) for r, c in rectangle] == [6, 7, 7, 6]
        for row, col in rectangle:
            grid.set(row, col, 0)

        assert count_solutions(grid, limit=2) == 2
        assert count_solutions(grid, limit=10) == 2
        assert not has_unique_solution(grid)

    def test_invalid_limit(self):
        """Limit must be positive."""
        with pytest.raises(ValueError):
            count_solutions(Grid(), limit=0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
