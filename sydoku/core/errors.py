"""Exceptions raised by the puzzle engine."""


class PuzzleEngineError(Exception):
    """Base class for all puzzle engine errors."""


class InvalidMove(PuzzleEngineError, ValueError):
    """A move targeted a clue cell or used an out-of-range coordinate or digit."""


class NoHintAvailable(PuzzleEngineError, LookupError):
    """The board has no empty cell left to hint at."""


class InvalidPuzzleData(PuzzleEngineError, ValueError):
    """Loaded grid data fails the consistency or uniqueness checks."""


class GenerationInvariantViolation(PuzzleEngineError, RuntimeError):
    """Randomized filling failed to complete a grid. Indicates a defect."""
