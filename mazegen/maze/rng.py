"""Seeded random source shared by all room-graph algorithms."""
from __future__ import annotations

import random
from typing import MutableSequence, TypeVar

T = TypeVar("T")


class DeterministicRandom:
    """Wraps a private ``random.Random``; the module-level generator is never touched.

    Identical seed and identical call sequence yield identical draws.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def next_in_range(self, lo: int, hi: int) -> int:
        """Integer in ``[lo, hi]`` inclusive."""
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return self._rng.randint(lo, hi)

    def shuffle(self, items: MutableSequence[T]) -> None:
        # Forward Fisher-Yates; every randomized ordering goes through here
        last = len(items) - 1
        for i in range(last + 1):
            j = self.next_in_range(i, last)
            if i != j:
                items[i], items[j] = items[j], items[i]


__all__ = ["DeterministicRandom"]
