"""Bounded undo/redo history of board and notes snapshots."""

from __future__ import annotations
from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Set

from ..core.grid import Grid

HISTORY_LIMIT = 50

Notes = List[List[Set[int]]]


def copy_notes(notes: Notes) -> Notes:
    return [[set(cell) for cell in row] for row in notes]


@dataclass
class Snapshot:
    """Board and notes as they were before a move."""
    board: Grid
    notes: Notes

    @classmethod
    def capture(cls, board: Grid, notes: Notes) -> Snapshot:
        return cls(board.copy(), copy_notes(notes))


class History:
    """
    Undo and redo stacks.

    The undo stack keeps at most ``limit`` entries and evicts the oldest
    one when full. Recording a new move clears the redo stack.
    """

    def __init__(self, limit: int = HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"History limit must be positive, got {limit}")
        self.limit = limit
        self._undo: deque = deque(maxlen=limit)
        self._redo: deque = deque(maxlen=limit)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    def record(self, snapshot: Snapshot) -> None:
        self._undo.append(snapshot)
        self._redo.clear()

    def undo(self, current: Snapshot) -> Optional[Snapshot]:
        """Swap ``current`` onto the redo stack and return the previous state."""
        if not self._undo:
            return None
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current: Snapshot) -> Optional[Snapshot]:
        """Swap ``current`` onto the undo stack and return the next state."""
        if not self._redo:
            return None
        self._undo.append(current)
        return self._redo.pop()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    def __len__(self) -> int:
        return len(self._undo)
