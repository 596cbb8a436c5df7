"""
Parent star generation.

Samples a spectral class and derives age, size, mass and luminosity from
class-specific bands. Luminosity is a piecewise multiple of size rather than
a continuous mass-luminosity relation, which keeps the classes visually
distinct.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

import structlog

from ..utils.random import get_prng, set_random_seed
from .habitable_zone import HabitableZone, calculate_habitable_zone
from .splitmix_prng import SplitMix32

logger = structlog.get_logger()


class SpectralClass(str, Enum):
    """Stellar classes ordered from coolest/smallest to hottest/largest."""

    M = "M"
    K = "K"
    G = "G"
    F = "F"
    A = "A"
    B = "B"
    O = "O"


SPECTRAL_CLASSES = list(SpectralClass)

# Age bands in billions of years; cool low-mass stars live far longer
STAR_AGE_RANGES: Dict[SpectralClass, Tuple[float, float]] = {
    SpectralClass.M: (1, 5000),
    SpectralClass.K: (1, 30),
    SpectralClass.G: (1, 10),
    SpectralClass.F: (1, 4),
    SpectralClass.A: (0.1, 3),
    SpectralClass.B: (0.01, 0.5),
    SpectralClass.O: (0.001, 0.1),
}

# (size in solar radii, mass in solar masses)
STAR_SIZE_MASS_RANGES: Dict[SpectralClass, Tuple[Tuple[float, float], Tuple[float, float]]] = {
    SpectralClass.M: ((0.1, 0.7), (0.08, 0.45)),
    SpectralClass.K: ((0.7, 0.96), (0.45, 0.8)),
    SpectralClass.G: ((0.96, 1.15), (0.8, 1.04)),
    SpectralClass.F: ((1.15, 1.4), (1.04, 1.4)),
    SpectralClass.A: ((1.4, 1.8), (1.4, 2.1)),
    SpectralClass.B: ((1.8, 6.6), (2.1, 16)),
    SpectralClass.O: ((6.6, 20), (16, 90)),
}

LUMINOSITY_MULTIPLIERS: Dict[SpectralClass, float] = {
    SpectralClass.M: 0.08,
    SpectralClass.K: 0.6,
    SpectralClass.G: 1,
    SpectralClass.F: 1.5,
    SpectralClass.A: 5,
    SpectralClass.B: 25,
    SpectralClass.O: 50,
}

# Effective temperature in Kelvin
STAR_TEMPERATURES: Dict[SpectralClass, float] = {
    SpectralClass.M: 3250,
    SpectralClass.K: 4250,
    SpectralClass.G: 5750,
    SpectralClass.F: 6750,
    SpectralClass.A: 8750,
    SpectralClass.B: 20000,
    SpectralClass.O: 35000,
}
DEFAULT_STAR_TEMPERATURE = 5500


@dataclass
class Star:
    """A generated parent star."""

    spectral_class: SpectralClass
    age: float  # Gyr
    size: float  # Solar radii
    mass: float  # Solar masses
    luminosity: float  # Solar luminosities
    habitable_zone: HabitableZone = field(default_factory=lambda: HabitableZone(0.0, 0.0))

    @property
    def temperature(self) -> float:
        """Effective temperature for this star's class."""
        return star_temperature(self.spectral_class)


def _as_class(spectral_class) -> Optional[SpectralClass]:
    """Resolve a class or class letter, ``None`` for anything unrecognised."""
    try:
        return SpectralClass(spectral_class)
    except ValueError:
        return None


def star_age(spectral_class, prng: SplitMix32) -> float:
    """Draw an age from the class band; 0 for an unknown class."""
    band = STAR_AGE_RANGES.get(_as_class(spectral_class))
    if band is None:
        return 0.0
    return prng.range(*band)


def star_size_and_mass(spectral_class, prng: SplitMix32) -> Tuple[float, float]:
    """Draw size then mass independently; (0, 0) for an unknown class."""
    bands = STAR_SIZE_MASS_RANGES.get(_as_class(spectral_class))
    if bands is None:
        return 0.0, 0.0
    size_band, mass_band = bands
    size = prng.range(*size_band)
    mass = prng.range(*mass_band)
    return size, mass


def star_luminosity(spectral_class, size: float) -> float:
    """Luminosity as size times the class multiplier; 0 for an unknown class."""
    multiplier = LUMINOSITY_MULTIPLIERS.get(_as_class(spectral_class))
    if multiplier is None:
        return 0.0
    return size * multiplier


def star_temperature(spectral_class) -> float:
    """Effective temperature lookup with a 5500 K default."""
    return STAR_TEMPERATURES.get(_as_class(spectral_class), DEFAULT_STAR_TEMPERATURE)


def generate_star(seed: Optional[int] = None, prng: Optional[SplitMix32] = None) -> Star:
    """
    Generate a parent star.

    Draw order is class, age, size, mass. When ``seed`` is given the stream
    is reseeded first: the passed ``prng`` if any, else the shared stream.

    Args:
        seed: Optional seed applied before drawing
        prng: Stream to draw from, defaults to the shared generation stream

    Returns:
        Fully populated Star, habitable zone included
    """
    if seed is not None:
        if prng is not None:
            prng.seed(seed)
        else:
            set_random_seed(seed)
    prng = prng or get_prng()

    spectral_class = prng.choice(SPECTRAL_CLASSES)
    age = star_age(spectral_class, prng)
    size, mass = star_size_and_mass(spectral_class, prng)
    luminosity = star_luminosity(spectral_class, size)

    star = Star(
        spectral_class=spectral_class,
        age=age,
        size=size,
        mass=mass,
        luminosity=luminosity,
    )
    star.habitable_zone = calculate_habitable_zone(luminosity)

    logger.info(
        "Generated parent star",
        spectral_class=spectral_class.value,
        size=round(size, 3),
        mass=round(mass, 3),
        luminosity=round(luminosity, 3),
    )
    return star
