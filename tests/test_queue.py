import pytest

from woodblock.game import ShapeKind, sequence_source
from woodblock.game.queue import consume, draw_queue, is_exhausted, refill_if_exhausted, rotate_slot

from tests.helpers import piece


def test_draw_queue_fills_every_slot():
    queue = draw_queue(sequence_source([0]), 3)
    assert len(queue) == 3
    assert all(p is not None for p in queue)


def test_consume_empties_only_that_slot():
    queue = (piece(), piece(ShapeKind.BOX), piece(ShapeKind.T))
    assert consume(queue, 1) == (queue[0], None, queue[2])
    with pytest.raises(IndexError):
        consume((None, queue[1], queue[2]), 0)
    with pytest.raises(IndexError):
        consume(queue, 3)


def test_partial_queue_is_not_refilled():
    queue = (None, None, piece())
    same, refilled = refill_if_exhausted(queue, sequence_source([1]))
    assert same is queue
    assert not refilled


def test_exhausted_queue_refills_all_slots():
    queue = (None, None, None)
    assert is_exhausted(queue)
    fresh, refilled = refill_if_exhausted(queue, sequence_source([1]))
    assert refilled
    assert len(fresh) == 3 and all(p is not None for p in fresh)


def test_rotate_slot():
    queue = (piece(ShapeKind.LINE2), None, None)
    rotated = rotate_slot(queue, 0)
    assert rotated[0].shape.shape == (2, 1)
    with pytest.raises(IndexError):
        rotate_slot(queue, 1)
