"""
Seeded random source for retry jitter.
"""

import random


class SeededRandomGenerator:
    """
    Deterministic stream of floats in [0, 1) derived from a seed string.

    Two generators built from the same seed yield the same sequence, across
    process runs too: string seeds are hashed with SHA-512 by `random.Random`,
    so the result does not depend on PYTHONHASHSEED. Not for cryptographic use.
    """

    def __init__(self, seed: str):
        self.seed = seed
        self._random = random.Random(seed)

    def next(self) -> float:
        """Return the next value in [0, 1)."""
        return self._random.random()

    def next_in(self, low: float, high: float) -> float:
        """Return the next value in the half-open range [low, high)."""
        return low + (high - low) * self.next()

    def __repr__(self) -> str:
        return f"SeededRandomGenerator(seed={self.seed!r})"
