"""9x9 Sudoku grid backed by a numpy array."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Set, Sequence

SIZE = 9
BOX_SIZE = 3
NUM_CELLS = SIZE * SIZE
DIGITS = range(1, SIZE + 1)


class Grid:
    """
    A 9x9 matrix of digits where 0 marks an empty cell.

    Grid is the only place that knows how rows, columns and boxes are laid
    out; the solver, validator and move engine ask it for peers and units
    instead of indexing the array themselves.
    """

    def __init__(self, grid: Optional[np.ndarray] = None):
        """
        Initialize a grid.

        Args:
            grid: Optional initial 9x9 array. If None, creates an empty grid.
        """
        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {grid.shape}")
            if grid.min() < 0 or grid.max() > SIZE:
                raise ValueError(f"Grid values must be 0-{SIZE}")
            self.grid = grid.astype(np.int32)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    @staticmethod
    def _check_index(row: int, col: int) -> None:
        # numpy would wrap negative indices silently
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"Cell ({row}, {col}) is outside the 9x9 grid")

    def copy(self) -> Grid:
        """Create a deep copy of the grid."""
        return Grid(self.grid)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        self._check_index(row, col)
        return int(self.grid[row, col])

    def set(self, row: int, col: int, digit: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        self._check_index(row, col)
        if digit < 0 or digit > SIZE:
            raise ValueError(f"Digit must be 0-{SIZE}, got {digit}")
        self.grid[row, col] = digit

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.get(row, col) == 0

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // BOX_SIZE) * BOX_SIZE
        box_col = (col // BOX_SIZE) * BOX_SIZE
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    @staticmethod
    def box_index(row: int, col: int) -> int:
        """Get the box index (0 to 8, row-major) for a cell."""
        return (row // BOX_SIZE) * BOX_SIZE + (col // BOX_SIZE)

    @staticmethod
    def box_cells(box: int) -> List[Tuple[int, int]]:
        """All cell positions of a box, in row-major order."""
        box_row = (box // BOX_SIZE) * BOX_SIZE
        box_col = (box % BOX_SIZE) * BOX_SIZE
        return [(box_row + i, box_col + j)
                for i in range(BOX_SIZE) for j in range(BOX_SIZE)]

    def row_peers(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """Cells sharing the row of (row, col), excluding itself."""
        self._check_index(row, col)
        return {(row, c) for c in range(SIZE) if c != col}

    def col_peers(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """Cells sharing the column of (row, col), excluding itself."""
        self._check_index(row, col)
        return {(r, col) for r in range(SIZE) if r != row}

    def box_peers(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """Cells sharing the box of (row, col), excluding itself."""
        self._check_index(row, col)
        return set(self.box_cells(self.box_index(row, col))) - {(row, col)}

    def peers(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """
        Get all peer cell positions (those in same row, column, or box).

        Returns:
            Set of 20 (r, c) tuples, excluding (row, col) itself.
        """
        return self.row_peers(row, col) | self.col_peers(row, col) | self.box_peers(row, col)

    def candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all digits that can legally go into an empty cell.

        Returns:
            Set of digits 1-9 not used by any peer. Empty set if the cell
            is already filled.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_box(row, col).tolist())
        return set(DIGITS) - used

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == 0)
        return list(zip(rows.tolist(), cols.tolist()))

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_full(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current grid state is valid.
        Does not check if the grid is full, only that no digit repeats in a unit.
        """
        units = [self.get_row(i) for i in range(SIZE)]
        units += [self.get_col(j) for j in range(SIZE)]
        units += [self.get_box(r, c)
                  for r in range(0, SIZE, BOX_SIZE)
                  for c in range(0, SIZE, BOX_SIZE)]

        for unit in units:
            non_zero = unit[unit != 0]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_solved(self) -> bool:
        """Check if every row, column and box is a permutation of 1-9."""
        return self.is_full() and self.is_valid()

    def to_list(self) -> List[int]:
        """Flatten to 81 ints in row-major order."""
        return self.grid.flatten().tolist()

    @classmethod
    def from_list(cls, cells: Sequence[int]) -> Grid:
        """Create a grid from 81 ints in row-major order."""
        if len(cells) != NUM_CELLS:
            raise ValueError(f"Expected {NUM_CELLS} cells, got {len(cells)}")
        return cls(np.array(cells, dtype=np.int32).reshape(SIZE, SIZE))

    def to_2d_list(self) -> List[List[int]]:
        """Convert to a nested list of rows."""
        return self.grid.tolist()

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> Grid:
        """Create a grid from a 2D list."""
        return cls(np.array(data, dtype=np.int32))

    def to_string(self) -> str:
        """Convert grid to an 81-char string, 0 for empty cells."""
        return ''.join(str(v) for v in self.to_list())

    @classmethod
    def from_string(cls, s: str) -> Grid:
        """
        Create a grid from a string representation.

        Args:
            s: String of length 81. '0' or '.' for empty, '1'-'9' for values.
        """
        if len(s) != NUM_CELLS:
            raise ValueError(f"String length must be {NUM_CELLS}, got {len(s)}")

        cells = []
        for c in s:
            if c == '.':
                cells.append(0)
            elif c.isdigit() and c.isascii():
                cells.append(int(c))
            else:
                raise ValueError(f"Invalid character {c!r} in grid string")
        return cls.from_list(cells)

    def __str__(self) -> str:
        """Pretty-print the grid."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'
            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Grid(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
