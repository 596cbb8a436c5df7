"""
Procedural star system generator.

Generates a parent star and its planets from a seeded stream and derives
atmosphere, surface temperature and interior properties for each planet.
"""

from .core import (
    OrbitResult,
    generate_orbit,
    is_in_habitable_zone,
    populate_universe,
)
from .utils.random import set_random_seed

__version__ = "0.1.0"

__all__ = ['OrbitResult', 'generate_orbit', 'is_in_habitable_zone',
           'populate_universe', 'set_random_seed']
