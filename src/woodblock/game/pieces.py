from __future__ import annotations

from enum import IntEnum
from typing import Callable, Iterator, List, Tuple

import numpy as np


RandomSource = Callable[[int], int]

Shape = np.ndarray


class ShapeKind(IntEnum):
    DOT = 0
    LINE2 = 1
    LINE2_V = 2
    LINE3 = 3
    LINE3_V = 4
    BOX = 5
    LINE4 = 6
    LINE4_V = 7
    L = 8
    L_REVERSE = 9
    T = 10
    Z = 11
    S = 12
    L_BIG = 13
    J_BIG = 14
    L_LONG = 15
    J_LONG = 16


def _frozen(rows) -> Shape:
    arr = np.array(rows, dtype=np.bool_)
    arr.flags.writeable = False
    return arr


BASE_SHAPES = {
    ShapeKind.DOT: _frozen([[1]]),
    ShapeKind.LINE2: _frozen([[1, 1]]),
    ShapeKind.LINE2_V: _frozen([[1], [1]]),
    ShapeKind.LINE3: _frozen([[1, 1, 1]]),
    ShapeKind.LINE3_V: _frozen([[1], [1], [1]]),
    ShapeKind.BOX: _frozen([[1, 1], [1, 1]]),
    ShapeKind.LINE4: _frozen([[1, 1, 1, 1]]),
    ShapeKind.LINE4_V: _frozen([[1], [1], [1], [1]]),
    ShapeKind.L: _frozen([[1, 0], [1, 0], [1, 1]]),
    ShapeKind.L_REVERSE: _frozen([[0, 1], [0, 1], [1, 1]]),
    ShapeKind.T: _frozen([[1, 1, 1], [0, 1, 0]]),
    ShapeKind.Z: _frozen([[1, 1, 0], [0, 1, 1]]),
    ShapeKind.S: _frozen([[0, 1, 1], [1, 1, 0]]),
    ShapeKind.L_BIG: _frozen([[1, 1, 1], [1, 0, 0]]),
    ShapeKind.J_BIG: _frozen([[1, 1, 1], [0, 0, 1]]),
    ShapeKind.L_LONG: _frozen([[1, 1], [1, 0], [1, 0]]),
    ShapeKind.J_LONG: _frozen([[1, 1], [0, 1], [0, 1]]),
}

COLORS: Tuple[str, ...] = (
    "amber",
    "orange",
    "yellow",
    "red",
    "emerald",
    "cyan",
    "indigo",
    "rose",
)

MAX_SHAPE_SIDE = 4


def make_shape(rows) -> Shape:
    """Build a read-only occupancy matrix, validating its bounds."""
    shape = _frozen(rows)
    if shape.ndim != 2 or shape.size == 0:
        raise ValueError("shape must be a non-empty 2D matrix")
    if max(shape.shape) > MAX_SHAPE_SIDE:
        raise ValueError(f"shape exceeds {MAX_SHAPE_SIDE}x{MAX_SHAPE_SIDE}: {shape.shape}")
    if not shape.any():
        raise ValueError("shape must have at least one occupied cell")
    return shape


def rotate(shape: Shape) -> Shape:
    """Rotate clockwise: new[c][R-1-r] = old[r][c]."""
    rotated = np.rot90(shape, 1, axes=(1, 0)).copy()
    rotated.flags.writeable = False
    return rotated


def rotations(shape: Shape) -> Iterator[Shape]:
    current = shape
    for _ in range(4):
        yield current
        current = rotate(current)


def offsets(shape: Shape) -> List[Tuple[int, int]]:
    """Occupied (row, col) offsets in row-major order."""
    rows, cols = np.nonzero(shape)
    return [(int(r), int(c)) for r, c in zip(rows, cols)]


class Piece:
    """A shape plus a color tag. Equal by value; pieces carry no identity."""

    __slots__ = ("shape", "color")

    def __init__(self, shape, color: str) -> None:
        if color not in COLORS:
            raise ValueError(f"unknown color tag: {color!r}")
        self.shape = make_shape(shape)
        self.color = color

    @property
    def cell_count(self) -> int:
        return int(np.count_nonzero(self.shape))

    def rotated(self) -> "Piece":
        return Piece(rotate(self.shape), self.color)

    def to_dict(self) -> dict:
        return {"shape": self.shape.astype(int).tolist(), "color": self.color}

    @classmethod
    def from_dict(cls, data: dict) -> "Piece":
        return cls(data["shape"], data["color"])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Piece):
            return NotImplemented
        return self.color == other.color and np.array_equal(self.shape, other.shape)

    def __hash__(self) -> int:
        return hash((self.color, self.shape.shape, self.shape.tobytes()))

    def __repr__(self) -> str:
        return f"Piece(shape={self.shape.astype(int).tolist()}, color={self.color!r})"


def draw_piece(random_source: RandomSource) -> Piece:
    kind = ShapeKind(random_source(len(ShapeKind)))
    color = COLORS[random_source(len(COLORS))]
    return Piece(BASE_SHAPES[kind], color)
