"""
Rotation and orbital speeds with their Earth-time conversions.

Speeds are in scene units (radians per animation tick) as consumed by the
renderer; the conversions map them back to hours and days. Random draws
here are cosmetic and use the cosmetic stream by default.
"""

import math
from typing import Optional

from ..utils.random import get_cosmetic_prng
from .habitable_zone import HabitableZone
from .splitmix_prng import SplitMix32

AU_TO_SCENE_SCALE = 21840.0
BASE_ORBITAL_SPEED = 0.00001

BASE_ROTATION_SPEED = 0.0001
MIN_ROTATION_SPEED = 0.00001
MAX_ROTATION_SPEED = 0.0005

ROTATION_SPEED_SCALE = 0.001
ORBITAL_SPEED_SCALE = 0.000000048

TIDAL_LOCK_PROBABILITY = 0.1


def orbital_speed(orbit_radius: float) -> float:
    """Angular speed along the orbit; farther planets move slower."""
    return BASE_ORBITAL_SPEED / (orbit_radius * AU_TO_SCENE_SCALE)


def rotation_speed(
    orbit_radius: float,
    zone: HabitableZone,
    system_outer_edge: float,
    prng: Optional[SplitMix32] = None,
) -> float:
    """
    Spin speed of a planet, signed for prograde or retrograde rotation.

    Planets near the habitable zone centre spin closer to the base speed;
    the magnitude is clamped to [1e-5, 5e-4].
    """
    prng = prng or get_cosmetic_prng()

    distance_fraction = orbit_radius / system_outer_edge
    scaling = 1 + zone.width / 2
    random_factor = prng.random() * scaling
    speed = BASE_ROTATION_SPEED + distance_fraction * random_factor * BASE_ROTATION_SPEED

    center = zone.midpoint
    if center > 0:
        distance_from_center = abs(orbit_radius - center) / center
        modifier = max(0.5, 1 - distance_from_center)
    else:
        modifier = 0.5
    speed = min(max(speed * modifier, MIN_ROTATION_SPEED), MAX_ROTATION_SPEED)

    return speed if prng.random() < 0.5 else -speed


def rotation_speed_to_earth_hours(speed: float) -> float:
    """Length of one sidereal day in Earth hours."""
    return (2 * math.pi / abs(speed)) * ROTATION_SPEED_SCALE


def orbital_speed_to_earth_days(speed: float, orbit_radius: float) -> float:
    """Length of one orbit in Earth days."""
    return (2 * math.pi * orbit_radius / speed) * ORBITAL_SPEED_SCALE


def local_days_per_orbit(rotation: float, orbital: float, orbit_radius: float) -> float:
    """Number of local sidereal days in one local year."""
    day_length_days = rotation_speed_to_earth_hours(rotation) / 24
    return orbital_speed_to_earth_days(orbital, orbit_radius) / day_length_days


def is_tidally_locked(prng: Optional[SplitMix32] = None) -> bool:
    prng = prng or get_cosmetic_prng()
    return prng.random() < TIDAL_LOCK_PROBABILITY
