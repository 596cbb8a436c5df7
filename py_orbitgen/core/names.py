"""System and planet designations."""

import string
from typing import Optional

from ..utils.random import get_cosmetic_prng
from .splitmix_prng import SplitMix32

NAME_CHARS = string.digits + string.ascii_uppercase
NAME_PREFIX = "P"


def generate_system_name(prng: Optional[SplitMix32] = None) -> str:
    """Catalogue-style designation such as ``P4QZ-07K``."""
    prng = prng or get_cosmetic_prng()
    head = "".join(prng.choice(NAME_CHARS) for _ in range(3))
    tail = "".join(prng.choice(NAME_CHARS) for _ in range(3))
    return f"{NAME_PREFIX}{head}-{tail}"


def planet_name(system_name: str, index: int) -> str:
    """Designation of the ``index``-th planet (1-based) of a system."""
    return f"{system_name}/{index}"
