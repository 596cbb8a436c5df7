"""Habitable zone boundaries from stellar luminosity."""

import math
from dataclasses import dataclass

# Stellar flux thresholds (relative to Earth) bounding liquid surface water
INNER_FLUX = 1.1
OUTER_FLUX = 0.53


@dataclass
class HabitableZone:
    """Orbit-radius band, in AU, where liquid water is plausible."""

    inner_boundary: float
    outer_boundary: float

    @property
    def midpoint(self) -> float:
        return (self.inner_boundary + self.outer_boundary) / 2

    @property
    def width(self) -> float:
        return self.outer_boundary - self.inner_boundary


def calculate_habitable_zone(luminosity: float) -> HabitableZone:
    """
    Compute the habitable zone for a star of the given luminosity.

    A zero luminosity (unknown spectral class) yields a degenerate zone at 0.
    """
    if luminosity < 0:
        raise ValueError(f"Luminosity must be non-negative, got {luminosity}")
    return HabitableZone(
        inner_boundary=math.sqrt(luminosity / INNER_FLUX),
        outer_boundary=math.sqrt(luminosity / OUTER_FLUX),
    )


def is_in_habitable_zone(orbit_radius: float, zone: HabitableZone) -> bool:
    """Boundary-inclusive membership test."""
    return zone.inner_boundary <= orbit_radius <= zone.outer_boundary
