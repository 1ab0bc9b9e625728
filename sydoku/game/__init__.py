"""Game module: puzzles, the move engine, hints and serialization."""

from .puzzle import Puzzle
from .history import History, Snapshot, HISTORY_LIMIT
from .play_state import PlayState
from .hints import HintLevel, HintRegion, Hint, get_hint, select_hint_cell
from .serialization import (
    encode_notes,
    decode_notes,
    puzzle_to_dict,
    puzzle_from_dict,
    play_state_to_dict,
    play_state_from_dict,
)

__all__ = [
    "Puzzle",
    "History",
    "Snapshot",
    "HISTORY_LIMIT",
    "PlayState",
    "HintLevel",
    "HintRegion",
    "Hint",
    "get_hint",
    "select_hint_cell",
    "encode_notes",
    "decode_notes",
    "puzzle_to_dict",
    "puzzle_from_dict",
    "play_state_to_dict",
    "play_state_from_dict",
]
