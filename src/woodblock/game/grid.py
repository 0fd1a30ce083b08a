from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .pieces import COLORS


Coordinate = Tuple[int, int]


class Board:
    """Square occupancy grid with copy-on-write semantics.

    Cells hold 0 when empty and ``palette index + 1`` when filled. The backing
    array is read-only; `occupy` and `clear` return new boards.
    """

    __slots__ = ("cells",)

    def __init__(self, cells: np.ndarray) -> None:
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise ValueError(f"board must be square, got shape {cells.shape}")
        if cells.min(initial=0) < 0 or cells.max(initial=0) > len(COLORS):
            raise ValueError("board cell outside the color palette")
        owned = cells.astype(np.int8, copy=True)
        owned.flags.writeable = False
        self.cells = owned

    @classmethod
    def empty(cls, size: int) -> "Board":
        return cls(np.zeros((int(size), int(size)), dtype=np.int8))

    @property
    def size(self) -> int:
        return int(self.cells.shape[0])

    def is_inside(self, r: int, c: int) -> bool:
        return 0 <= r < self.size and 0 <= c < self.size

    def _checked(self, r: int, c: int) -> Coordinate:
        if not self.is_inside(r, c):
            raise IndexError(f"cell ({r}, {c}) outside {self.size}x{self.size} board")
        return r, c

    def is_occupied(self, r: int, c: int) -> bool:
        return bool(self.cells[self._checked(r, c)] != 0)

    def color_at(self, r: int, c: int) -> Optional[str]:
        value = int(self.cells[self._checked(r, c)])
        return COLORS[value - 1] if value else None

    def occupy(self, cells: Iterable[Coordinate], color: str) -> "Board":
        value = COLORS.index(color) + 1
        grid = self.cells.copy()
        for r, c in cells:
            grid[self._checked(r, c)] = value
        return Board(grid)

    def clear(self, cells: Iterable[Coordinate]) -> "Board":
        grid = self.cells.copy()
        for r, c in cells:
            grid[self._checked(r, c)] = 0
        return Board(grid)

    def clone(self) -> "Board":
        return Board(self.cells)

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def occupancy(self) -> np.ndarray:
        return (self.cells != 0).astype(np.int8)

    def to_rows(self) -> List[List[Optional[str]]]:
        return [[COLORS[v - 1] if v else None for v in row] for row in self.cells.tolist()]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Optional[str]]]) -> "Board":
        grid = [[0 if tag is None else COLORS.index(tag) + 1 for tag in row] for row in rows]
        return cls(np.array(grid, dtype=np.int8))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash((self.cells.shape, self.cells.tobytes()))

    def __repr__(self) -> str:
        return f"Board(size={self.size}, filled={self.filled_count()})"
