import numpy as np

from woodblock.game import BASE_SHAPES, Board, GameState, Piece, ShapeKind


def piece(kind=ShapeKind.DOT, color="amber"):
    return Piece(BASE_SHAPES[kind], color)


def board_from_filled(cells, size=8, color="amber"):
    return Board.empty(size).occupy(cells, color)


def full_board_except(empty_cells, size=8):
    empty = set(empty_cells)
    return board_from_filled(
        [(r, c) for r in range(size) for c in range(size) if (r, c) not in empty], size
    )


def make_state(board=None, queue=None, score=0, game_over=False):
    return GameState(
        board=board if board is not None else Board.empty(8),
        queue=tuple(queue) if queue is not None else (piece(), piece(), piece()),
        score=score,
        game_over=game_over,
    )


def isolated_holes_board():
    """One hole per row and column, no two holes edge-adjacent, plus (0, 5)."""
    holes = [(r, (3 * r) % 8) for r in range(8)] + [(0, 5)]
    return full_board_except(holes), holes


def occupied(board):
    return int(np.count_nonzero(board.cells))
