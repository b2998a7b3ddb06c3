"""
Injectable randomness for jitter and weighted sampling.

Anything with a next() -> float in [0, 1) method works as a source.
"""

import random
from typing import Iterable, Optional, Protocol


class RandomSource(Protocol):
    def next(self) -> float:
        ...


class SeededRandom:
    """random.Random behind the RandomSource interface. seed=None is unseeded."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next(self) -> float:
        return self._rng.random()


class SequenceRandom:
    """Replays a fixed list of draws, cycling when exhausted."""

    def __init__(self, values: Iterable[float]):
        self._values = [float(v) for v in values]
        if not self._values:
            raise ValueError("SequenceRandom needs at least one value")
        for v in self._values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Random draws must be in [0, 1), got {v}")
        self._pos = 0

    def next(self) -> float:
        value = self._values[self._pos % len(self._values)]
        self._pos += 1
        return value


def default_source(rng: Optional[RandomSource] = None) -> RandomSource:
    return rng if rng is not None else SeededRandom()
