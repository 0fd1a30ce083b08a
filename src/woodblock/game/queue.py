"""Ready queue of pending pieces.

Queues are tuples of ``Optional[Piece]``. A slot empties only when its piece
is placed, and slots are refilled all together once every slot is empty.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .pieces import Piece, RandomSource, draw_piece


PieceQueue = Tuple[Optional[Piece], ...]


def draw_queue(random_source: RandomSource, size: int = 3) -> PieceQueue:
    return tuple(draw_piece(random_source) for _ in range(size))


def is_valid_slot(queue: PieceQueue, slot: int) -> bool:
    return 0 <= slot < len(queue) and queue[slot] is not None


def consume(queue: PieceQueue, slot: int) -> PieceQueue:
    if not is_valid_slot(queue, slot):
        raise IndexError(f"slot {slot} is empty or out of range")
    return queue[:slot] + (None,) + queue[slot + 1 :]


def rotate_slot(queue: PieceQueue, slot: int) -> PieceQueue:
    piece = queue[slot] if is_valid_slot(queue, slot) else None
    if piece is None:
        raise IndexError(f"slot {slot} is empty or out of range")
    return queue[:slot] + (piece.rotated(),) + queue[slot + 1 :]


def is_exhausted(queue: PieceQueue) -> bool:
    return all(piece is None for piece in queue)


def refill_if_exhausted(queue: PieceQueue, random_source: RandomSource) -> Tuple[PieceQueue, bool]:
    if not is_exhausted(queue):
        return queue, False
    return draw_queue(random_source, len(queue)), True


def active_pieces(queue: PieceQueue) -> List[Piece]:
    return [piece for piece in queue if piece is not None]
