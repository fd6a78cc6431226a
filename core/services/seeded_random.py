"""Deterministic pseudo-random sequence used by the random sorting method."""

from __future__ import annotations

import random


class SeededRandom:
    """Repeatable float sequence in [0, 1), restarted by `set_seed`."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)

    def set_seed(self, seed: int) -> None:
        """Reset the sequence so it starts over for `seed`."""
        self._rng.seed(seed)

    def next(self) -> float:
        return self._rng.random()
