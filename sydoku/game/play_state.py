"""Move engine: the mutable session a player drives over one puzzle."""

from __future__ import annotations
import logging
from typing import Set, Tuple

import numpy as np

from ..core.errors import InvalidMove
from ..core.grid import SIZE, DIGITS
from ..core.validator import find_conflicts
from .history import History, Notes, Snapshot, HISTORY_LIMIT
from .puzzle import Puzzle

logger = logging.getLogger(__name__)


def _is_index(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class PlayState:
    """
    A game in progress.

    Holds the current board and pencil notes on top of an immutable
    Puzzle, together with the undo/redo history and the mistake and hint
    counters. Rejected moves raise InvalidMove and leave everything
    untouched.

    Once the mistake limit is reached every move raises InvalidMove; undo
    and redo stay available.

    Mistakes are counted once per placement of a wrong digit, so placing
    the same wrong digit twice counts twice. Undo and redo restore board
    and notes only; the counters keep their values.
    """

    def __init__(self, puzzle: Puzzle, mistake_limit: int = 0,
                 history_limit: int = HISTORY_LIMIT):
        """
        Start a session.

        Args:
            puzzle: The puzzle to play.
            mistake_limit: Mistakes allowed before the game is over.
                0 means unlimited.
            history_limit: Maximum number of undo steps kept.
        """
        if mistake_limit < 0:
            raise ValueError(f"mistake_limit must be >= 0, got {mistake_limit}")
        self.puzzle = puzzle
        self.board = puzzle.initial.copy()
        self.notes: Notes = [[set() for _ in range(SIZE)] for _ in range(SIZE)]
        self.history = History(history_limit)
        self.mistake_count = 0
        self.hints_used = 0
        self.mistake_limit = mistake_limit

    # Validation

    def _check_cell(self, row: int, col: int) -> None:
        if not (_is_index(row) and _is_index(col) and 0 <= row < SIZE and 0 <= col < SIZE):
            raise InvalidMove(f"Cell ({row}, {col}) is outside the 9x9 board")
        if self.puzzle.is_clue(row, col):
            raise InvalidMove(f"Cell ({row}, {col}) is a clue and cannot be changed")

    def _check_playable(self) -> None:
        if self.is_game_over:
            raise InvalidMove(f"Game over: mistake limit of {self.mistake_limit} reached")

    @staticmethod
    def _check_digit(digit: int, allow_zero: bool) -> None:
        low = 0 if allow_zero else 1
        if not (_is_index(digit) and low <= digit <= SIZE):
            raise InvalidMove(f"Digit must be {low}-{SIZE}, got {digit}")

    # Moves

    def place(self, row: int, col: int, digit: int) -> None:
        """
        Write a digit into a non-clue cell, clearing its notes.

        A digit of 0 empties the cell. A non-zero digit that differs from
        the solution counts as a mistake.

        Raises:
            InvalidMove: For clue cells, out-of-range coordinates or digits,
                or once the game is over.
        """
        self._check_playable()
        self._check_cell(row, col)
        self._check_digit(digit, allow_zero=True)

        self.history.record(self._snapshot())
        self.board.set(row, col, digit)
        self.notes[row][col].clear()

        if digit != 0 and digit != self.puzzle.answer(row, col):
            self.mistake_count += 1
            logger.debug("Wrong digit %d at (%d, %d), mistakes=%d",
                         digit, row, col, self.mistake_count)

    def clear(self, row: int, col: int) -> None:
        """Empty a non-clue cell. Never counts as a mistake."""
        self.place(row, col, 0)

    def toggle_note(self, row: int, col: int, digit: int) -> None:
        """
        Add or remove a pencil mark on an empty non-clue cell.

        Raises:
            InvalidMove: For clue cells, filled cells, bad coordinates or
                digits, or once the game is over.
        """
        self._check_playable()
        self._check_cell(row, col)
        self._check_digit(digit, allow_zero=False)
        if self.board.get(row, col) != 0:
            raise InvalidMove(f"Cell ({row}, {col}) is filled; notes need an empty cell")

        self.history.record(self._snapshot())
        self.notes[row][col] ^= {digit}

    def auto_fill_notes(self) -> None:
        """Replace the notes of every empty cell with its current candidates."""
        self._check_playable()
        self.history.record(self._snapshot())
        for row, col in self.board.empty_cells():
            self.notes[row][col] = self.board.candidates(row, col)

    # History

    def _snapshot(self) -> Snapshot:
        return Snapshot.capture(self.board, self.notes)

    def _restore(self, snapshot: Snapshot) -> None:
        self.board = snapshot.board
        self.notes = snapshot.notes

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def undo(self) -> bool:
        """Step back one move. Returns False if there was nothing to undo."""
        previous = self.history.undo(self._snapshot())
        if previous is None:
            return False
        self._restore(previous)
        return True

    def redo(self) -> bool:
        """Re-apply an undone move. Returns False if there was nothing to redo."""
        following = self.history.redo(self._snapshot())
        if following is None:
            return False
        self._restore(following)
        return True

    # Queries

    def conflicts(self) -> Set[Tuple[int, int]]:
        """Cells whose digit repeats within a row, column or box."""
        return find_conflicts(self.board)

    def incorrect_cells(self) -> Set[Tuple[int, int]]:
        """Filled cells whose digit differs from the solution."""
        wrong = (self.board.grid != 0) & (self.board.grid != self.puzzle.solution.grid)
        rows, cols = np.nonzero(wrong)
        return set(zip(rows.tolist(), cols.tolist()))

    def digit_count(self, digit: int) -> int:
        """How many times ``digit`` appears on the board."""
        if digit not in DIGITS:
            raise ValueError(f"Digit must be 1-9, got {digit}")
        return int(np.sum(self.board.grid == digit))

    def is_complete(self) -> bool:
        """True iff the board matches the solution in every cell."""
        return self.board == self.puzzle.solution

    @property
    def is_game_over(self) -> bool:
        """True once the mistake limit (if any) has been reached."""
        return self.mistake_limit > 0 and self.mistake_count >= self.mistake_limit

    def __repr__(self) -> str:
        return (f"PlayState(filled={self.board.count_filled()}, "
                f"mistakes={self.mistake_count}, hints={self.hints_used})")
