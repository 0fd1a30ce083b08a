"""Placement legality.

`check_placement` is the single legality check; placement, ghost preview and
the game-over search all go through it.
"""

from __future__ import annotations

from typing import List

from .grid import Board, Coordinate
from .pieces import Shape, offsets


def check_placement(board: Board, origin: Coordinate, shape: Shape) -> bool:
    r0, c0 = origin
    for i, j in offsets(shape):
        r, c = r0 + i, c0 + j
        if not board.is_inside(r, c):
            return False
        if board.is_occupied(r, c):
            return False
    return True


def placed_cells(origin: Coordinate, shape: Shape) -> List[Coordinate]:
    r0, c0 = origin
    return [(r0 + i, c0 + j) for i, j in offsets(shape)]


def valid_origins(board: Board, shape: Shape) -> List[Coordinate]:
    """Get all legal (row, col) origins for a shape"""
    return [
        (r, c)
        for r in range(board.size)
        for c in range(board.size)
        if check_placement(board, (r, c), shape)
    ]


def ghost_cells(board: Board, origin: Coordinate, shape: Shape) -> List[Coordinate]:
    """Cells a placement at `origin` would cover, or [] when it is illegal."""
    if not check_placement(board, origin, shape):
        return []
    return placed_cells(origin, shape)
