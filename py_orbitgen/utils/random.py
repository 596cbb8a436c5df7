"""
Random number generation utilities.

Two process-wide SplitMix32 streams are kept here: the generation stream,
which drives every draw that affects a generated system, and the cosmetic
stream, which drives presentation-only jitter (names, rotation speed,
tidal locking). Python's random and NumPy's random are not used so that a
seed reproduces a system exactly.

Generation functions accept an explicit ``prng`` and only fall back to
these shared streams when none is passed.
"""

from typing import Optional

from ..core.splitmix_prng import SplitMix32

# Global PRNG instances
_prng: Optional[SplitMix32] = None
_cosmetic_prng: Optional[SplitMix32] = None


def set_random_seed(seed: int) -> None:
    """
    Reseed the shared generation stream.

    Any reseed is observed by every later call that uses the shared stream.

    Args:
        seed: Integer seed
    """
    global _prng
    _prng = SplitMix32(seed)


def get_prng() -> SplitMix32:
    """
    Get the shared generation stream, creating it with a time seed if needed.

    Returns:
        SplitMix32 instance
    """
    global _prng
    if _prng is None:
        _prng = SplitMix32()
    return _prng


def set_cosmetic_seed(seed: Optional[int]) -> None:
    """Reseed the cosmetic stream (``None`` picks a time seed)."""
    global _cosmetic_prng
    _cosmetic_prng = SplitMix32(seed)


def get_cosmetic_prng() -> SplitMix32:
    """Get the cosmetic stream, creating it with a time seed if needed."""
    global _cosmetic_prng
    if _cosmetic_prng is None:
        _cosmetic_prng = SplitMix32()
    return _cosmetic_prng
