"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

from random import Random


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def uniform(self, low: float, high: float) -> float:
        """Return a float in the half-open range [low, high)."""
        if high < low:
            raise ValueError("Upper bound must not be below lower bound.")
        return low + (high - low) * self._random.random()
