import itertools
import random

import pytest

from tictactoe.game_logic import (
    CELL_COUNT, WINNING_LINES, Cell, Draw, GameState, NoOutcome, Win,
    evaluate, place_mark, reset, status_text,
)

X, O, _ = Cell.X, Cell.O, Cell.EMPTY


def play(*moves):
    state = reset()
    for index in moves:
        state = place_mark(state, index)
    return state


def test_empty_grid_has_no_outcome():
    assert evaluate((_,) * 9) == NoOutcome()


def test_top_row_win():
    assert evaluate((X, X, X, O, O, _, _, _, _)) == Win(X, (0, 1, 2))


def test_full_board_without_line_is_draw():
    assert evaluate((X, O, X, X, O, O, O, X, X)) == Draw()


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins_for_o(line):
    grid = [_] * 9
    for i in line:
        grid[i] = O
    assert evaluate(tuple(grid)) == Win(O, line)


def test_first_line_in_order_wins_on_invalid_grid():
    # rows 1 and 2 both complete; first listed triple is reported
    assert evaluate((O, O, O, X, X, X, _, _, _)) == Win(O, (0, 1, 2))


def test_win_on_full_board_beats_draw():
    assert evaluate((X, O, X, O, X, O, O, X, X)) == Win(X, (0, 4, 8))


def test_evaluate_total_and_deterministic():
    for grid in itertools.product((_, X, O), repeat=9):
        first = evaluate(grid)
        assert isinstance(first, (NoOutcome, Win, Draw))
        assert evaluate(grid) == first


def test_initial_state():
    state = reset()
    assert state.grid == (_,) * 9
    assert state.next_player is X
    assert not state.is_finished
    assert state.winning_line == ()


def test_reset_is_idempotent():
    assert reset() == reset() == GameState()


def test_marks_alternate():
    state = play(0, 1)
    assert state.grid[0] is X
    assert state.grid[1] is O
    assert state.next_player is X


def test_place_on_occupied_cell_is_noop():
    after_first = place_mark(reset(), 0)
    assert place_mark(after_first, 0) is after_first


@pytest.mark.parametrize("index", [-1, 9, 100, 1.5, "3", None, True])
def test_bad_index_is_noop(index):
    state = reset()
    assert place_mark(state, index) is state


def test_place_mark_does_not_mutate_input():
    state = reset()
    place_mark(state, 4)
    assert state == reset()


def test_win_then_further_moves_ignored():
    state = play(0, 3, 1, 4, 2)
    assert state.outcome == Win(X, (0, 1, 2))
    assert state.is_finished
    assert state.winning_line == (0, 1, 2)
    assert place_mark(state, 5) is state


def test_draw_game():
    state = play(0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert state.outcome == Draw()
    assert state.is_finished
    assert status_text(state) == "Draw"


def test_mark_counts_stay_balanced_over_random_games():
    rng = random.Random(1234)
    for _game in range(200):
        state = reset()
        for _move in range(15):
            state = place_mark(state, rng.randrange(-1, CELL_COUNT + 1))
            xs = state.grid.count(X)
            os_ = state.grid.count(O)
            assert xs - os_ in (0, 1)
            assert (state.next_player is O) == (xs > os_)


def test_status_text():
    assert status_text(reset()) == "Next: X"
    assert status_text(play(4)) == "Next: O"
    assert status_text(play(0, 3, 1, 4, 2)) == "Winner: X"
    assert status_text(play(8, 0, 7, 1, 5, 2)) == "Winner: O"


def test_is_cell_playable():
    state = play(4)
    assert state.is_cell_playable(0)
    assert not state.is_cell_playable(4)
    assert not state.is_cell_playable(9)
    assert not play(0, 3, 1, 4, 2).is_cell_playable(8)


def test_opposite():
    assert Cell.X.opposite() is Cell.O
    assert Cell.O.opposite() is Cell.X
    assert Cell.EMPTY.opposite() is Cell.EMPTY
