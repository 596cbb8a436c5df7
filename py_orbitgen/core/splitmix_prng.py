"""
SplitMix32 PRNG used for every generation draw.

A 32-bit splitmix-style scrambler: the state advances by a golden-ratio
constant and the output is mixed by two xor-shift/multiply rounds. Two
streams seeded identically produce identical sequences, and nearby seeds
give uncorrelated early outputs.
"""

import time
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_GOLDEN_GAMMA = 0x9E3779B9
_MIX_1 = 0x21F0AAAD
_MIX_2 = 0x735A2D97
_TWO_32 = 4294967296.0


def _uint32(n: int) -> int:
    """Convert to unsigned 32-bit integer."""
    return int(n) & _MASK32


def time_seed() -> int:
    """Seed derived from the wall clock in milliseconds."""
    return time.time_ns() // 1_000_000


class SplitMix32:
    """
    Seeded uniform stream in [0, 1).

    Not thread-safe; share one instance per logical generation call.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize with an integer seed, or a time-based seed when omitted."""
        self.call_count = 0
        self.state = 0
        self.seed(time_seed() if seed is None else seed)

    def seed(self, value: int) -> None:
        """Reset the internal state deterministically from ``value``."""
        self.state = _uint32(value)
        self.initial_seed = self.state

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        self.state = _uint32(self.state + _GOLDEN_GAMMA)
        t = self.state ^ (self.state >> 16)
        t = _uint32(t * _MIX_1)
        t ^= t >> 15
        t = _uint32(t * _MIX_2)
        t ^= t >> 15
        return t / _TWO_32

    def range(self, min_val: float, max_val: float) -> float:
        """Uniform float in [min_val, max_val)."""
        return self.random() * (max_val - min_val) + min_val

    def int_range(self, min_val: int, max_val: int) -> int:
        """Uniform integer in [min_val, max_val], both ends inclusive."""
        return int(self.random() * (max_val - min_val + 1)) + min_val

    def choice(self, seq: Sequence[T]) -> T:
        """Choose a random element from a non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self.random() * len(seq))]

    def __repr__(self) -> str:
        return f"SplitMix32(seed={self.initial_seed}, calls={self.call_count})"
