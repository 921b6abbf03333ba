"""Deterministic randomness and selection helpers.

RandomSource wraps ``random.Random`` (Mersenne Twister). Integer seeding and
``randrange`` are stable across platforms and Python 3 releases, so a fixed
seed replays the same draws everywhere.
"""

from __future__ import annotations

import random
import time
from collections.abc import Mapping, Sequence
from typing import TypeVar

T = TypeVar("T")


class RandomSource:
    """A seeded source of uniform integer draws.

    A seed of 0 means "use the wall clock"; such sources are explicitly
    not reproducible. Negative seeds are folded into the unsigned 64-bit
    range (two's complement), so -5 and 5 replay different draws.
    """

    def __init__(self, seed: int = 0):
        self.seed = seed
        self.deterministic = seed != 0
        self._rng = random.Random(
            seed & 0xFFFFFFFFFFFFFFFF if seed != 0 else time.time_ns()
        )

    def intn(self, n: int) -> int:
        """Uniform integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"intn() requires n > 0, got {n}")
        return self._rng.randrange(n)

    def __repr__(self) -> str:
        return f"RandomSource(seed={self.seed})"


def new_random(seed: int = 0) -> RandomSource:
    return RandomSource(seed)


def pick(candidates: Sequence[T], rng: RandomSource | None = None) -> T:
    """Return one element of ``candidates`` chosen uniformly.

    Raises:
        ValueError: If ``candidates`` is empty. An empty pool is a data bug
            in whatever profile supplied it.
    """
    if not candidates:
        raise ValueError("pick() called with an empty candidate pool")
    if rng is None:
        rng = new_random(0)
    return candidates[rng.intn(len(candidates))]


def pick_weighted(table: Mapping[T, int], rng: RandomSource) -> T:
    """Choose a key from ``{key: weight}`` with probability weight/total."""
    total = sum(table.values())
    if total <= 0:
        raise ValueError("pick_weighted() requires a positive total weight")
    roll = rng.intn(total)
    cumulative = 0
    for key, weight in table.items():
        cumulative += weight
        if roll < cumulative:
            return key
    raise AssertionError("unreachable: roll exceeded cumulative weight")


def chance(percent: int, rng: RandomSource) -> bool:
    """True with probability ``percent``/100 (always draws, even at 0 or 100)."""
    return rng.intn(100) < percent
