"""Hint engine: escalating suggestions for the next cell to fill."""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np

from ..core.errors import NoHintAvailable
from ..core.grid import Grid

if TYPE_CHECKING:
    from .play_state import PlayState


class HintLevel(IntEnum):
    """How much a hint gives away. Callers pick the level."""
    REGION = 1
    NUMBER = 2
    CELL = 3
    REVEAL = 4


@dataclass(frozen=True)
class HintRegion:
    """A row, column or box, with a 0-based index."""
    kind: str
    index: int

    def __str__(self) -> str:
        return f"{self.kind} {self.index + 1}"


@dataclass(frozen=True)
class Hint:
    """
    A hint at a given level.

    Only the fields the level reveals are set:
    REGION sets ``region``, NUMBER sets ``digit``, CELL sets ``cell``,
    REVEAL sets ``cell`` and ``digit``.
    """
    level: HintLevel
    region: Optional[HintRegion] = None
    cell: Optional[Tuple[int, int]] = None
    digit: Optional[int] = None


def select_hint_cell(board: Grid) -> Tuple[int, int]:
    """
    Pick the empty cell with the fewest candidates.

    Ties go to the first such cell in row-major order. Clue cells are never
    empty, so every returned cell is playable.

    Raises:
        NoHintAvailable: If the board has no empty cell.
    """
    best = None
    best_count = 10
    for row, col in board.empty_cells():
        count = len(board.candidates(row, col))
        if count < best_count:
            best, best_count = (row, col), count
    if best is None:
        raise NoHintAvailable("No empty cell left to hint at")
    return best


def hint_region(board: Grid, row: int, col: int) -> HintRegion:
    """The unit of (row, col) with the fewest empty cells; ties prefer row, then column."""
    box = Grid.box_index(row, col)
    options = [
        (int(np.sum(board.get_row(row) == 0)), HintRegion("row", row)),
        (int(np.sum(board.get_col(col) == 0)), HintRegion("column", col)),
        (int(np.sum(board.get_box(row, col) == 0)), HintRegion("box", box)),
    ]
    return min(options, key=lambda option: option[0])[1]


def get_hint(state: PlayState, level: HintLevel = HintLevel.REGION) -> Hint:
    """
    Build a hint for the current board without changing it.

    The only side effect is incrementing ``state.hints_used``. A REVEAL hint
    is applied by the caller through ``state.place``.

    Raises:
        NoHintAvailable: If the board has no empty cell.
    """
    level = HintLevel(level)
    row, col = select_hint_cell(state.board)
    digit = state.puzzle.answer(row, col)
    state.hints_used += 1

    if level == HintLevel.REGION:
        return Hint(level, region=hint_region(state.board, row, col))
    if level == HintLevel.NUMBER:
        return Hint(level, digit=digit)
    if level == HintLevel.CELL:
        return Hint(level, cell=(row, col))
    return Hint(level, cell=(row, col), digit=digit)
