"""
Tests for the game rules: board helpers, win detection,
move validation, and game state.
"""

import itertools

import pytest

from logic.board import (
    Mark, Outcome, empty_board, empty_cells, side_to_move,
    board_from_string, board_to_string, index_to_cell, cell_to_index,
)
from logic.win_checker import WinChecker, evaluate
from logic.move_validator import MoveValidator
from logic.game_state import GameState, apply_move, reset_game


X, O = Mark.X, Mark.O


# ==================== BOARD ====================

def test_empty_board_has_nine_empty_cells():
    board = empty_board()
    assert len(board) == 9
    assert empty_cells(board) == list(range(9))


def test_side_to_move_follows_parity():
    assert side_to_move(empty_board()) == X
    assert side_to_move(board_from_string("X________")) == O
    assert side_to_move(board_from_string("XO_______")) == X


def test_board_string_helpers():
    board = board_from_string("XX_ OO_ ___")
    assert board[:6] == (X, X, None, O, O, None)
    assert board_to_string(board) == "XX_OO____"

    with pytest.raises(ValueError):
        board_from_string("XO")


def test_index_cell_conversion():
    for index in range(9):
        row, col = index_to_cell(index)
        assert cell_to_index(row, col) == index
    assert index_to_cell(5) == (1, 2)


# ==================== WIN CHECKER ====================

@pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
@pytest.mark.parametrize("mark", [X, O])
def test_every_line_wins(line, mark):
    cells = [None] * 9
    for index in line:
        cells[index] = mark
    board = tuple(cells)

    assert evaluate(board) == Outcome.win_for(mark)
    assert WinChecker().get_winning_line(board) == line


def test_in_progress_board():
    assert evaluate(empty_board()) == Outcome.IN_PROGRESS
    assert evaluate(board_from_string("XO_ _X_ __O")) == Outcome.IN_PROGRESS


def test_full_board_without_line_is_draw():
    board = board_from_string("XOX XOO OXX")
    assert evaluate(board) == Outcome.DRAW
    assert WinChecker().check_draw(board)


def test_full_board_with_line_is_win_not_draw():
    # Last move completes the bottom row on a full board
    board = board_from_string("XOX OOX XXX")
    assert evaluate(board) == Outcome.X_WINS
    assert not WinChecker().check_draw(board)


def test_all_full_boards_without_a_line_are_draws():
    checker = WinChecker()
    for cells in itertools.product([X, O], repeat=9):
        board = tuple(cells)
        has_line = any(
            board[a] == board[b] == board[c] for a, b, c in checker.WINNING_LINES
        )
        expected = Outcome.DRAW if not has_line else Outcome.win_for(checker.check_winner(board))
        assert evaluate(board) == expected


def test_outcome_helpers():
    assert Outcome.X_WINS.winner == X
    assert Outcome.O_WINS.winner == O
    assert Outcome.DRAW.winner is None
    assert Outcome.DRAW.is_terminal
    assert not Outcome.IN_PROGRESS.is_terminal


# ==================== MOVE VALIDATOR ====================

def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(empty_board(), 4, X)
    assert result.is_valid
    assert result.error_message is None


@pytest.mark.parametrize("index", [-1, 9, 100, 1.5, "4", None, True])
def test_validator_rejects_bad_index(index):
    result = MoveValidator().validate_move(empty_board(), index, X)
    assert not result.is_valid
    assert "Invalid position" in result.error_message


def test_validator_rejects_occupied_cell():
    board = board_from_string("X________")
    result = MoveValidator().validate_move(board, 0, O)
    assert not result.is_valid
    assert "occupied" in result.error_message


def test_validator_rejects_move_after_game_over():
    board = board_from_string("XXX OO_ ___")
    result = MoveValidator().validate_move(board, 5, O)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"
    assert MoveValidator().get_valid_moves(board) == []


def test_validator_rejects_empty_mark():
    result = MoveValidator().validate_move(empty_board(), 0, None)
    assert not result.is_valid


# ==================== APPLY MOVE / RESET ====================

def test_apply_move_returns_new_board():
    board = empty_board()
    new_board = apply_move(board, 4, X)

    assert new_board[4] == X
    assert [c for i, c in enumerate(new_board) if i != 4] == [None] * 8
    assert board == empty_board()


def test_apply_move_on_filled_cell_never_changes_board():
    board = board_from_string("XO_ ___ ___")
    for index in (0, 1):
        for mark in (X, O):
            assert apply_move(board, index, mark) is None
    assert board == board_from_string("XO_ ___ ___")


def test_apply_move_rejects_out_of_range_and_terminal():
    assert apply_move(empty_board(), 9, X) is None
    assert apply_move(empty_board(), -1, X) is None
    assert apply_move(board_from_string("OOO XX_ X__"), 5, X) is None


def test_reset_game():
    board = reset_game()
    assert board == (None,) * 9
    assert evaluate(board) == Outcome.IN_PROGRESS
    assert side_to_move(board) == X


# ==================== GAME STATE ====================

def test_game_state_alternates_players():
    game = GameState()
    assert game.current_player == X

    assert game.make_move(4)
    assert game.current_player == O
    assert game.make_move(0)
    assert game.current_player == X

    assert [m.player for m in game.moves] == [X, O]
    assert [m.index for m in game.moves] == [4, 0]
    assert [m.move_number for m in game.moves] == [0, 1]


def test_game_state_rejects_occupied_cell():
    game = GameState()
    game.make_move(4)
    board_before = game.board

    assert not game.make_move(4)
    assert game.board == board_before
    assert len(game.moves) == 1
    assert game.current_player == O


def test_game_state_detects_win_and_blocks_further_moves():
    game = GameState()
    for index in [0, 3, 1, 4, 2]:
        assert game.make_move(index)

    assert game.is_game_over
    assert game.winner == X
    assert game.outcome == Outcome.X_WINS
    assert not game.make_move(8)


def test_game_state_draw():
    game = GameState()
    for index in [0, 1, 2, 4, 3, 5, 7, 6, 8]:
        assert game.make_move(index)

    assert game.is_draw
    assert game.winner is None
    assert game.get_empty_cells() == []


def test_game_state_reset():
    game = GameState()
    game.make_move(0)
    game.make_move(4)
    game.reset()

    assert game.board == empty_board()
    assert game.moves == []
    assert game.current_player == X
    assert game.outcome == Outcome.IN_PROGRESS


def test_game_state_copy_is_independent():
    game = GameState()
    game.make_move(0)
    clone = game.copy()
    clone.make_move(1)

    assert game.board[1] is None
    assert len(game.moves) == 1
    assert len(clone.moves) == 2


def test_print_board(capsys):
    game = GameState()
    game.make_move(4)
    game.print_board()

    out = capsys.readouterr().out
    assert "X" in out
    assert "Current turn: O" in out


def test_apply_move_leaves_turn_order_to_the_caller():
    # Any mark may be placed; only range, occupancy and game over are checked
    board = apply_move(empty_board(), 0, O)
    assert board[0] == O
    assert side_to_move(board) == O


def test_game_state_moves_keep_parity():
    game = GameState()
    for index in [4, 0, 8, 2]:
        assert game.make_move(index)
        x_count = game.board.count(X)
        o_count = game.board.count(O)
        assert x_count - o_count in (0, 1)
    assert [m.player for m in game.moves] == [X, O, X, O]
