import pytest

from woodblock.game import Board, ScoringRules, clear_full_lines, find_full_lines

from tests.helpers import board_from_filled


def test_no_full_lines():
    result = clear_full_lines(board_from_filled([(0, c) for c in range(7)]))
    assert result.lines_cleared == 0
    assert result.board.filled_count() == 7


def test_row_and_column_cleared_together_share_cell_once():
    cells = {(3, c) for c in range(8)} | {(r, 5) for r in range(8)} | {(0, 0)}
    board = board_from_filled(cells)
    assert find_full_lines(board) == ((3,), (5,))
    result = clear_full_lines(board)
    assert result.lines_cleared == 2
    assert result.board.filled_count() == 1
    assert result.board.is_occupied(0, 0)


def test_full_board_clears_every_line():
    board = board_from_filled([(r, c) for r in range(8) for c in range(8)])
    result = clear_full_lines(board)
    assert result.lines_cleared == 16
    assert result.board == Board.empty(8)


@pytest.mark.parametrize("lines, bonus", [(0, 0), (1, 10), (2, 30), (3, 60), (4, 100)])
def test_triangular_bonus(lines, bonus):
    assert ScoringRules().clear_bonus(lines) == bonus


def test_score_for_placement_adds_cells_and_bonus():
    rules = ScoringRules()
    assert rules.score_for_placement(1, 2) == 31
    assert rules.score_for_placement(4, 0) == 4
