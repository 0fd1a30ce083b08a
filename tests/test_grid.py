import numpy as np
import pytest

from woodblock.game import Board


def test_empty_board():
    board = Board.empty(8)
    assert board.size == 8
    assert board.filled_count() == 0
    assert not board.is_occupied(7, 7)
    assert board.color_at(0, 0) is None


def test_occupy_returns_new_board_and_keeps_original():
    board = Board.empty(8)
    filled = board.occupy([(0, 0), (1, 2)], "indigo")
    assert filled.is_occupied(0, 0)
    assert filled.color_at(1, 2) == "indigo"
    assert filled.filled_count() == 2
    assert board.filled_count() == 0


def test_clear_cells():
    board = Board.empty(4).occupy([(0, 0), (0, 1)], "red")
    cleared = board.clear([(0, 0)])
    assert not cleared.is_occupied(0, 0)
    assert cleared.is_occupied(0, 1)
    assert board.is_occupied(0, 0)


def test_out_of_range_access_raises():
    board = Board.empty(8)
    with pytest.raises(IndexError):
        board.is_occupied(8, 0)
    with pytest.raises(IndexError):
        board.is_occupied(-1, 0)
    with pytest.raises(IndexError):
        board.occupy([(0, 8)], "amber")


def test_backing_array_is_read_only():
    board = Board.empty(8)
    with pytest.raises(ValueError):
        board.cells[0, 0] = 1


def test_clone_is_equal():
    board = Board.empty(8).occupy([(3, 3)], "rose")
    copy = board.clone()
    assert copy == board
    assert copy.cells is not board.cells


def test_rows_round_trip():
    board = Board.empty(3).occupy([(1, 1)], "cyan")
    rows = board.to_rows()
    assert rows == [[None, None, None], [None, "cyan", None], [None, None, None]]
    assert Board.from_rows(rows) == board


def test_rejects_non_square_or_unknown_values():
    with pytest.raises(ValueError):
        Board(np.zeros((2, 3), dtype=np.int8))
    with pytest.raises(ValueError):
        Board(np.full((2, 2), 99, dtype=np.int8))
    with pytest.raises(ValueError):
        Board.from_rows([["plaid"]])
