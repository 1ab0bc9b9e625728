"""Shared fixtures for the puzzle engine tests."""

import pytest

from sydoku.game import Puzzle, PlayState

from sample_puzzles import TEST_PUZZLE


@pytest.fixture
def puzzle():
    return Puzzle.from_code(TEST_PUZZLE)


@pytest.fixture
def state(puzzle):
    return PlayState(puzzle)
