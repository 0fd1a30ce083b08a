from __future__ import annotations

from dataclasses import dataclass
from typing import Set, Tuple

import numpy as np

from .grid import Board, Coordinate


@dataclass(frozen=True)
class LineClearResult:
    board: Board
    rows: Tuple[int, ...]
    cols: Tuple[int, ...]

    @property
    def lines_cleared(self) -> int:
        return len(self.rows) + len(self.cols)


def find_full_lines(board: Board) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Full rows and columns of one snapshot, scanned independently."""
    filled = board.cells != 0
    rows = tuple(int(i) for i in np.where(np.all(filled, axis=1))[0])
    cols = tuple(int(j) for j in np.where(np.all(filled, axis=0))[0])
    return rows, cols


def clear_full_lines(board: Board) -> LineClearResult:
    rows, cols = find_full_lines(board)
    if not rows and not cols:
        return LineClearResult(board=board, rows=(), cols=())
    size = board.size
    # A cell on both a full row and a full column is cleared once.
    cells: Set[Coordinate] = {(r, c) for r in rows for c in range(size)}
    cells.update((r, c) for c in cols for r in range(size))
    return LineClearResult(board=board.clear(cells), rows=rows, cols=cols)
