"""Random sources injected into the engine.

A random source is any callable ``source(n)`` returning a uniform integer in
``[0, n)``. The engine never touches global randomness.
"""

from __future__ import annotations

from itertools import cycle
from typing import Iterable, Optional

import numpy as np

from .pieces import RandomSource


def numpy_source(seed: Optional[int] = None, rng: Optional[np.random.Generator] = None) -> RandomSource:
    generator = rng if rng is not None else np.random.default_rng(seed)

    def source(n: int) -> int:
        return int(generator.integers(0, n))

    return source


def sequence_source(values: Iterable[int]) -> RandomSource:
    """Replay `values` forever, each taken modulo the requested range."""
    items = list(values)
    if not items:
        raise ValueError("sequence_source needs at least one value")
    it = cycle(items)

    def source(n: int) -> int:
        return next(it) % n

    return source
