"""Random number helpers."""

from __future__ import annotations

import random
from typing import Iterable, Optional, TypeVar, Union

T = TypeVar("T")


class Rand:
    """A source of random values with game-friendly helpers."""

    def __init__(self, seed: Optional[Union[int, str, bytes]] = None) -> None:
        self._rng = random.Random(seed)

    def next(self, n: float = 1.0) -> float:
        """A float from 0 up to, but not including, ``n``."""
        return self._rng.random() * n

    def inext(self, n: int) -> int:
        """An integer from 0 up to, but not including, ``n``."""
        return int(self.next(float(n)))

    def range(self, low: float, high: float) -> float:
        """A float between ``low`` and ``high``."""
        if low > high:
            raise ValueError(f"low ({low}) must not exceed high ({high})")
        return self.next() * (high - low) + low

    def irange(self, low: int, high: int) -> int:
        """An integer from ``low`` up to, but not including, ``high``."""
        return int(self.range(float(low), float(high)))

    def chance(self, n: Union[int, float], outof: Union[int, float]) -> bool:
        """True with probability ``n`` out of ``outof``; always False when ``outof`` is not positive."""
        if outof <= 0:
            return False
        if isinstance(n, int) and isinstance(outof, int):
            return self.inext(outof) < n
        return self.next() < n / outof

    def choose(self, items: Iterable[T]) -> T:
        """One of ``items``, picked uniformly."""
        pool = list(items)
        if not pool:
            raise IndexError("cannot choose from an empty collection")
        return pool[self.inext(len(pool))]