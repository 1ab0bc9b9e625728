"""
Flat-array representation of puzzles and sessions.

Grids become 81 ints in row-major order and notes become one 9-bit mask
per cell (bit d-1 set for digit d). The dicts only hold JSON-compatible
values, so the persistence layer can store them as it likes. Everything
is re-validated on load.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Sequence

from ..core.difficulty import Difficulty
from ..core.errors import InvalidPuzzleData
from ..core.grid import Grid, NUM_CELLS, SIZE
from .history import Notes
from .play_state import PlayState
from .puzzle import Puzzle

logger = logging.getLogger(__name__)

MAX_NOTE_MASK = (1 << SIZE) - 1


def encode_notes(notes: Notes) -> List[int]:
    """Pack a 9x9 grid of digit sets into 81 bitmasks."""
    return [sum(1 << (d - 1) for d in cell) for row in notes for cell in row]


def decode_notes(masks: Sequence[int]) -> Notes:
    """Unpack 81 bitmasks into a 9x9 grid of digit sets."""
    if len(masks) != NUM_CELLS:
        raise InvalidPuzzleData(f"Expected {NUM_CELLS} note masks, got {len(masks)}")
    for mask in masks:
        if not isinstance(mask, int) or not 0 <= mask <= MAX_NOTE_MASK:
            raise InvalidPuzzleData(f"Note mask out of range: {mask!r}")
    return [
        [{d for d in range(1, SIZE + 1) if masks[row * SIZE + col] & (1 << (d - 1))}
         for col in range(SIZE)]
        for row in range(SIZE)
    ]


def _grid_from_cells(cells: Any, name: str) -> Grid:
    if not isinstance(cells, (list, tuple)) or len(cells) != NUM_CELLS:
        raise InvalidPuzzleData(f"'{name}' must be a list of {NUM_CELLS} ints")
    if not all(isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= SIZE for v in cells):
        raise InvalidPuzzleData(f"'{name}' values must be ints 0-{SIZE}")
    return Grid.from_list(cells)


def _counter(data: Dict[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise InvalidPuzzleData(f"'{key}' must be a non-negative int, got {value!r}")
    return value


def puzzle_to_dict(puzzle: Puzzle) -> Dict[str, Any]:
    """Convert a puzzle to a JSON-compatible dict."""
    return {
        "initial": puzzle.initial.to_list(),
        "solution": puzzle.solution.to_list(),
        "difficulty": puzzle.difficulty.value,
        "daily_seed": puzzle.daily_seed,
    }


def puzzle_from_dict(data: Dict[str, Any]) -> Puzzle:
    """
    Rebuild a puzzle, checking the clues are consistent with the solution
    and have exactly one completion.

    Raises:
        InvalidPuzzleData: If any field is missing or malformed, or the
            puzzle invariants do not hold.
    """
    try:
        if not isinstance(data, dict):
            raise InvalidPuzzleData("Puzzle data must be a dict")
        try:
            difficulty = Difficulty(data["difficulty"])
        except KeyError as e:
            raise InvalidPuzzleData("Missing 'difficulty'") from e
        except ValueError as e:
            raise InvalidPuzzleData(f"Unknown difficulty {data['difficulty']!r}") from e

        daily = data.get("daily_seed")
        if daily is not None and not isinstance(daily, str):
            raise InvalidPuzzleData("'daily_seed' must be a date string or null")

        initial = _grid_from_cells(data.get("initial"), "initial")
        solution = _grid_from_cells(data.get("solution"), "solution")
        return Puzzle.validated(initial, solution, difficulty, daily)
    except InvalidPuzzleData as e:
        logger.warning("Rejected puzzle data: %s", e)
        raise


def play_state_to_dict(state: PlayState) -> Dict[str, Any]:
    """Convert a session to a JSON-compatible dict. History is not kept."""
    return {
        "puzzle": puzzle_to_dict(state.puzzle),
        "board": state.board.to_list(),
        "notes": encode_notes(state.notes),
        "mistake_count": state.mistake_count,
        "hints_used": state.hints_used,
        "mistake_limit": state.mistake_limit,
    }


def play_state_from_dict(data: Dict[str, Any]) -> PlayState:
    """
    Resume a session saved with ``play_state_to_dict``.

    The restored session starts with empty undo and redo stacks.

    Raises:
        InvalidPuzzleData: If the puzzle is invalid, the board changes a
            clue, notes sit on filled cells, or a counter is malformed.
    """
    if not isinstance(data, dict):
        raise InvalidPuzzleData("Session data must be a dict")
    puzzle = puzzle_from_dict(data.get("puzzle"))

    try:
        board = _grid_from_cells(data.get("board"), "board")
        initial = puzzle.initial
        clues = initial.grid != 0
        if (board.grid[clues] != initial.grid[clues]).any():
            raise InvalidPuzzleData("Board changes a clue cell")

        notes = decode_notes(data.get("notes", [0] * NUM_CELLS))
        for row in range(SIZE):
            for col in range(SIZE):
                if notes[row][col] and board.get(row, col) != 0:
                    raise InvalidPuzzleData(f"Notes on filled cell ({row}, {col})")

        state = PlayState(puzzle, mistake_limit=_counter(data, "mistake_limit"))
        state.board = board
        state.notes = notes
        state.mistake_count = _counter(data, "mistake_count")
        state.hints_used = _counter(data, "hints_used")
        return state
    except InvalidPuzzleData as e:
        logger.warning("Rejected session data: %s", e)
        raise
    except TypeError as e:
        logger.warning("Rejected session data: %s", e)
        raise InvalidPuzzleData(str(e)) from e
