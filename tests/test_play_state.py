"""Tests for the move engine."""

import pytest
from sydoku.core.difficulty import Difficulty
from sydoku.core.errors import InvalidMove
from sydoku.game import PlayState, HISTORY_LIMIT
from sydoku.generator import generate_puzzle

from sample_puzzles import TEST_SOLUTION

# (0, 2) is empty in the test puzzle; its answer is 4
EMPTY = (0, 2)
ANSWER = 4
# (0, 0) is a clue holding 5
CLUE = (0, 0)


def board_and_notes(state):
    return state.board.to_list(), [[set(c) for c in row] for row in state.notes]


class TestPlace:
    """Placing and clearing digits."""

    def test_starts_from_clues(self, state, puzzle):
        assert state.board == puzzle.initial
        assert state.mistake_count == 0
        assert state.hints_used == 0
        assert not state.can_undo

    def test_correct_digit(self, state):
        state.place(*EMPTY, ANSWER)
        assert state.board.get(*EMPTY) == ANSWER
        assert state.mistake_count == 0

    def test_wrong_digit_counts_one_mistake(self, state):
        """The wrong digit stays on the board until corrected or cleared."""
        state.place(*EMPTY, 9)
        assert state.mistake_count == 1
        assert state.board.get(*EMPTY) == 9
        assert state.incorrect_cells() == {EMPTY}

        state.place(*EMPTY, ANSWER)
        assert state.mistake_count == 1
        assert state.incorrect_cells() == set()

    def test_same_wrong_digit_twice_counts_twice(self, state):
        state.place(*EMPTY, 9)
        state.place(*EMPTY, 9)
        assert state.mistake_count == 2

    def test_clear_is_not_a_mistake(self, state):
        state.place(*EMPTY, ANSWER)
        state.clear(*EMPTY)
        assert state.board.get(*EMPTY) == 0
        assert state.mistake_count == 0

    def test_place_clears_notes(self, state):
        state.toggle_note(*EMPTY, 1)
        state.toggle_note(*EMPTY, 4)
        state.place(*EMPTY, ANSWER)
        assert state.notes[EMPTY[0]][EMPTY[1]] == set()

    @pytest.mark.parametrize("row, col, digit", [
        (0, 0, 1),     # clue cell
        (-1, 0, 1),
        (0, 9, 1),
        (0, 2, 10),
        (0, 2, -1),
    ])
    def test_invalid_moves_leave_state_untouched(self, state, row, col, digit):
        before = board_and_notes(state)
        with pytest.raises(InvalidMove):
            state.place(row, col, digit)
        assert board_and_notes(state) == before
        assert not state.can_undo

    def test_cannot_clear_clue(self, state):
        with pytest.raises(InvalidMove):
            state.clear(*CLUE)

    def test_invalid_move_is_value_error(self, state):
        with pytest.raises(ValueError):
            state.place(*CLUE, 5)


class TestNotes:
    """Pencil marks."""

    def test_toggle_twice_is_identity(self, state):
        state.toggle_note(*EMPTY, 3)
        assert state.notes[0][2] == {3}
        state.toggle_note(*EMPTY, 3)
        assert state.notes[0][2] == set()

    def test_notes_need_empty_cell(self, state):
        state.place(*EMPTY, ANSWER)
        with pytest.raises(InvalidMove):
            state.toggle_note(*EMPTY, 1)

    def test_notes_rejected_on_clue(self, state):
        with pytest.raises(InvalidMove):
            state.toggle_note(*CLUE, 1)

    def test_note_digit_zero_rejected(self, state):
        with pytest.raises(InvalidMove):
            state.toggle_note(*EMPTY, 0)

    def test_notes_are_undoable(self, state):
        state.toggle_note(*EMPTY, 7)
        assert state.undo()
        assert state.notes[0][2] == set()

    def test_auto_fill_notes(self, state):
        state.auto_fill_notes()
        for row, col in state.board.empty_cells():
            assert state.notes[row][col] == state.board.candidates(row, col)
        assert ANSWER in state.notes[0][2]
        assert state.notes[0][0] == set()

        state.undo()
        assert all(not cell for row in state.notes for cell in row)


class TestUndoRedo:
    """History of moves."""

    def test_empty_history_is_noop(self, state):
        before = board_and_notes(state)
        assert not state.undo()
        assert not state.redo()
        assert board_and_notes(state) == before

    def test_place_undo_redo_round_trip(self, state):
        state.toggle_note(0, 3, 2)
        state.place(*EMPTY, ANSWER)
        after_place = board_and_notes(state)

        state.undo()
        assert state.board.get(*EMPTY) == 0
        assert state.notes[0][3] == {2}

        state.redo()
        assert board_and_notes(state) == after_place

    def test_new_move_clears_redo(self, state):
        state.place(*EMPTY, ANSWER)
        state.undo()
        assert state.can_redo
        state.place(0, 3, 6)
        assert not state.can_redo

    def test_undo_keeps_mistake_count(self, state):
        state.place(*EMPTY, 9)
        state.undo()
        assert state.board.get(*EMPTY) == 0
        assert state.mistake_count == 1

    def test_history_is_bounded(self, state):
        for i in range(HISTORY_LIMIT + 10):
            state.place(*EMPTY, (i % 9) + 1)
        undone = 0
        while state.undo():
            undone += 1
        assert undone == HISTORY_LIMIT
        # The oldest snapshots (including the empty cell) were evicted
        assert state.board.get(*EMPTY) != 0

    def test_custom_history_limit(self, puzzle):
        state = PlayState(puzzle, history_limit=2)
        for digit in (1, 2, 3):
            state.place(*EMPTY, digit)
        assert state.undo() and state.undo()
        assert not state.undo()
        assert state.board.get(*EMPTY) == 1


class TestQueries:
    """Conflicts, completion and counters."""

    def test_no_conflicts_at_start(self, state):
        assert state.conflicts() == set()

    def test_conflict_flags_both_cells(self, state):
        # 5 is a clue at (0, 0); placing 5 at (0, 2) clashes in row and box
        state.place(*EMPTY, 5)
        assert state.conflicts() == {CLUE, EMPTY}

    def test_complete_after_filling_solution(self, state):
        for row in range(9):
            for col in range(9):
                if not state.puzzle.is_clue(row, col):
                    state.place(row, col, int(TEST_SOLUTION[row * 9 + col]))
        assert state.is_complete()
        assert state.conflicts() == set()
        assert state.mistake_count == 0

    def test_not_complete_when_partial(self, state):
        assert not state.is_complete()

    def test_digit_count(self, state):
        before = state.digit_count(ANSWER)
        state.place(*EMPTY, ANSWER)
        assert state.digit_count(ANSWER) == before + 1
        with pytest.raises(ValueError):
            state.digit_count(0)

    def test_mistake_limit(self, puzzle):
        state = PlayState(puzzle, mistake_limit=2)
        state.place(*EMPTY, 9)
        assert not state.is_game_over
        state.place(*EMPTY, 8)
        assert state.is_game_over

    def test_moves_rejected_after_game_over(self, puzzle):
        """Once the limit is hit, no move goes through and mistakes stop counting."""
        state = PlayState(puzzle, mistake_limit=1)
        state.place(*EMPTY, 9)
        assert state.is_game_over

        with pytest.raises(InvalidMove):
            state.place(*EMPTY, 8)
        with pytest.raises(InvalidMove):
            state.clear(*EMPTY)
        with pytest.raises(InvalidMove):
            state.auto_fill_notes()
        assert state.mistake_count == 1
        assert state.board.get(*EMPTY) == 9

        assert state.undo()
        assert state.board.get(*EMPTY) == 0
        with pytest.raises(InvalidMove):
            state.toggle_note(*EMPTY, 4)

    def test_unlimited_mistakes(self, state):
        for _ in range(5):
            state.place(*EMPTY, 9)
        assert not state.is_game_over


class TestEasyScenario:
    """Playing a generated Easy puzzle to the end."""

    def test_solve_in_order(self):
        puzzle = generate_puzzle(Difficulty.EASY, date_seed="2024-01-01")
        assert puzzle.clue_count == 46
        state = PlayState(puzzle)

        for row, col in puzzle.initial.empty_cells():
            assert not state.is_complete()
            state.place(row, col, puzzle.answer(row, col))

        assert state.is_complete()
        assert state.mistake_count == 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
