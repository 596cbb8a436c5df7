"""
Orbit layout.

Orbit radii are spaced evenly in log space between a fixed inner orbit and
an outer orbit that grows with the habitable zone, so inner orbits pack
closely and outer orbits spread out. No randomness is used here.
"""

from typing import List

import numpy as np

from .star import Star

MIN_ORBIT_AU = 0.2
MIN_OUTER_ORBIT_AU = 50.0
OUTER_ORBIT_MARGIN_AU = 20.0

MIN_PLANETS = 3
MAX_PLANETS = 18


def max_orbit(star: Star) -> float:
    """Outermost orbit bound: at least 50 AU, or 20 AU past the habitable zone."""
    return max(MIN_OUTER_ORBIT_AU, star.habitable_zone.outer_boundary + OUTER_ORBIT_MARGIN_AU)


def _slot_radii(star: Star, slots, total: int) -> np.ndarray:
    log_min = np.log(MIN_ORBIT_AU)
    spacing = (np.log(max_orbit(star)) - log_min) / total
    return np.exp(log_min + spacing * np.asarray(slots))


def orbit_radius(star: Star, index: int, total: int) -> float:
    """Radius of slot ``index`` out of ``total`` slots."""
    return float(_slot_radii(star, index, total))


def layout_orbits(star: Star, planet_count: int) -> List[float]:
    """
    Compute the orbit radius for every slot.

    Args:
        star: Parent star with its habitable zone set
        planet_count: Number of slots, must lie in [3, 18]

    Returns:
        Strictly increasing list of radii in AU
    """
    if not MIN_PLANETS <= planet_count <= MAX_PLANETS:
        raise ValueError(
            f"Planet count must be between {MIN_PLANETS} and {MAX_PLANETS}, got {planet_count}"
        )

    radii = _slot_radii(star, np.arange(planet_count), planet_count)
    return [float(r) for r in radii]
