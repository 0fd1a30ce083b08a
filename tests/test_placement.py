from woodblock.game import BASE_SHAPES, Board, ShapeKind, check_placement, ghost_cells, valid_origins

from tests.helpers import board_from_filled


def test_single_cell_fits_everywhere_on_empty_board():
    board = Board.empty(8)
    dot = BASE_SHAPES[ShapeKind.DOT]
    for r in range(8):
        for c in range(8):
            assert check_placement(board, (r, c), dot)
    assert len(valid_origins(board, dot)) == 64


def test_out_of_bounds_rejected():
    board = Board.empty(8)
    line4 = BASE_SHAPES[ShapeKind.LINE4]
    assert check_placement(board, (0, 4), line4)
    assert not check_placement(board, (0, 5), line4)
    assert not check_placement(board, (-1, 0), line4)
    assert not check_placement(board, (8, 0), BASE_SHAPES[ShapeKind.DOT])


def test_overlap_rejected():
    board = board_from_filled([(1, 1)])
    box = BASE_SHAPES[ShapeKind.BOX]
    assert not check_placement(board, (0, 0), box)
    assert not check_placement(board, (1, 1), box)
    assert check_placement(board, (2, 2), box)


def test_unoccupied_offsets_may_cover_filled_cells():
    # L occupies (0,0), (1,0), (2,0), (2,1); offset (0,1) is free.
    board = board_from_filled([(0, 1)])
    assert check_placement(board, (0, 0), BASE_SHAPES[ShapeKind.L])


def test_valid_origins_counts_line_positions():
    line4 = BASE_SHAPES[ShapeKind.LINE4]
    assert len(valid_origins(Board.empty(8), line4)) == 8 * 5


def test_ghost_cells():
    board = Board.empty(8)
    box = BASE_SHAPES[ShapeKind.BOX]
    assert ghost_cells(board, (6, 6), box) == [(6, 6), (6, 7), (7, 6), (7, 7)]
    assert ghost_cells(board, (7, 7), box) == []
