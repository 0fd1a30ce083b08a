from __future__ import annotations

from .grid import Board
from .pieces import Piece, Shape, rotations
from .placement import check_placement
from .queue import PieceQueue, active_pieces


def can_place_anywhere(board: Board, shape: Shape) -> bool:
    for r in range(board.size):
        for c in range(board.size):
            if check_placement(board, (r, c), shape):
                return True
    return False


def piece_fits(board: Board, piece: Piece) -> bool:
    return any(can_place_anywhere(board, shape) for shape in rotations(piece.shape))


def is_game_over(board: Board, queue: PieceQueue) -> bool:
    """True only if no queued piece fits anywhere under any rotation.

    An all-empty queue is never game over; it is about to be refilled.
    """
    pieces = active_pieces(queue)
    if not pieces:
        return False
    return not any(piece_fits(board, piece) for piece in pieces)
