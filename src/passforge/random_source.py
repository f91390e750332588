"""
Random sources used by all generators.

SystemRandomSource (OS CSPRNG) is the default. SeededRandomSource wraps a
numpy Generator for reproducible tests and demos and must never be used to
produce real secrets.
"""

import secrets
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(ABC):
    """Uniform random source consumed by generators."""

    #: Whether the source is suitable for producing real secrets
    cryptographic: bool = False

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Return a uniform integer in [0, n)."""
        pass

    @abstractmethod
    def spawn(self, n: int) -> List["RandomSource"]:
        """Create ``n`` independent sources, one per worker."""
        pass

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer in [a, b] (inclusive)."""
        if b < a:
            raise ValueError(f"Empty range: [{a}, {b}]")
        return a + self.randbelow(b - a + 1)

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of ``seq``."""
        if len(seq) == 0:
            raise ValueError("Cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]


class SystemRandomSource(RandomSource):
    """Random source backed by the operating system CSPRNG."""

    cryptographic = True

    def __init__(self):
        self._rng = secrets.SystemRandom()

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return self._rng.randrange(n)

    def spawn(self, n: int) -> List[RandomSource]:
        return [SystemRandomSource() for _ in range(n)]

    def __repr__(self) -> str:
        return "SystemRandomSource()"


class SeededRandomSource(RandomSource):
    """
    Deterministic random source for tests, examples and benchmarks.

    Not cryptographically suitable.
    """

    cryptographic = False

    def __init__(self, seed: Optional[int] = None, *, _seed_sequence: Optional[np.random.SeedSequence] = None):
        self._seed_sequence = _seed_sequence or np.random.SeedSequence(seed)
        self._rng = np.random.default_rng(self._seed_sequence)

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"Upper bound must be positive, got {n}")
        return int(self._rng.integers(0, n))

    def spawn(self, n: int) -> List[RandomSource]:
        return [
            SeededRandomSource(_seed_sequence=child)
            for child in self._seed_sequence.spawn(n)
        ]

    def __repr__(self) -> str:
        return f"SeededRandomSource(entropy={self._seed_sequence.entropy})"


def default_source() -> RandomSource:
    """Return a fresh cryptographic random source."""
    return SystemRandomSource()
