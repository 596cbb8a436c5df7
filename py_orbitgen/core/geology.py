"""
Planetary interior and crust composition.

Layer sizes scale with the planet radius. Tidal forcing from the parent
star (mass over cubed orbit radius) enlarges the core, and irradiation
(star size squared over orbit radius squared) thickens the crust.
"""

from dataclasses import asdict, dataclass
from typing import Dict

import numpy as np

from .planets import Planet, PlanetType
from .star import Star

EARTH_RADIUS_M = 6.371e6

BASE_CORE_FRACTION = 0.55
CORE_FRACTION_LIMITS = (0.3, 0.7)
BASE_CRUST_FRACTION = 0.005
MIN_CRUST_THICKNESS_M = 5_000.0
MAX_CRUST_FRACTION = 0.05

ELEMENTS: Dict[str, str] = {
    "H": "Hydrogen",
    "He": "Helium",
    "C": "Carbon",
    "N": "Nitrogen",
    "O": "Oxygen",
    "Na": "Sodium",
    "Mg": "Magnesium",
    "Al": "Aluminium",
    "Si": "Silicon",
    "S": "Sulfur",
    "Cl": "Chlorine",
    "K": "Potassium",
    "Ca": "Calcium",
    "Ti": "Titanium",
    "Fe": "Iron",
}

# kg/m^3
CRUST_DENSITY: Dict[PlanetType, float] = {
    PlanetType.LAVA: 3000,
    PlanetType.TERRESTRIAL: 2700,
    PlanetType.OCEAN: 2900,
    PlanetType.GAS_GIANT: 1300,
    PlanetType.ICE_GIANT: 1200,
    PlanetType.DWARF: 1900,
}

# Mass fractions, each row sums to 1
CRUST_ELEMENT_FRACTIONS: Dict[PlanetType, Dict[str, float]] = {
    PlanetType.TERRESTRIAL: {
        "O": 0.461, "Si": 0.282, "Al": 0.082, "Fe": 0.056, "Ca": 0.042,
        "Na": 0.024, "Mg": 0.023, "K": 0.021, "Ti": 0.006, "H": 0.003,
    },
    PlanetType.LAVA: {
        "O": 0.44, "Si": 0.21, "Mg": 0.12, "Fe": 0.12, "Ca": 0.05,
        "Al": 0.04, "Na": 0.01, "Ti": 0.01,
    },
    PlanetType.OCEAN: {
        "O": 0.60, "Si": 0.15, "H": 0.07, "Al": 0.05, "Fe": 0.04,
        "Ca": 0.03, "Na": 0.03, "Mg": 0.02, "Cl": 0.01,
    },
    PlanetType.GAS_GIANT: {"H": 0.74, "He": 0.24, "C": 0.01, "O": 0.01},
    PlanetType.ICE_GIANT: {"O": 0.40, "H": 0.25, "C": 0.15, "N": 0.10, "He": 0.08, "S": 0.02},
    PlanetType.DWARF: {
        "O": 0.45, "H": 0.15, "Si": 0.15, "C": 0.10, "N": 0.08, "Fe": 0.05, "Mg": 0.02,
    },
}


@dataclass
class CoreLayer:
    size: float  # Radius, m
    volume: float  # m^3


@dataclass
class ShellLayer:
    thickness: float  # m
    volume: float  # m^3


@dataclass
class GeologicalData:
    """Interior structure of a planet."""

    core: CoreLayer
    mantle: ShellLayer
    crust: ShellLayer

    def to_dict(self) -> dict:
        return asdict(self)


def generate_geological_data(
    planet_radius: float,
    orbit_radius: float,
    star_size: float,
    star_mass: float,
) -> GeologicalData:
    """
    Estimate core, mantle and crust dimensions.

    Args:
        planet_radius: Planet radius in Earth radii
        orbit_radius: Orbit radius in AU
        star_size: Star radius in solar radii
        star_mass: Star mass in solar masses

    Returns:
        GeologicalData with thicknesses in metres and volumes in cubic metres
    """
    for name, value in (
        ("planet_radius", planet_radius),
        ("orbit_radius", orbit_radius),
        ("star_size", star_size),
        ("star_mass", star_mass),
    ):
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")

    radius_m = planet_radius * EARTH_RADIUS_M
    tidal = star_mass / orbit_radius**3
    irradiation = star_size**2 / orbit_radius**2

    core_fraction = float(
        np.clip(BASE_CORE_FRACTION + 0.02 * np.log10(1 + tidal), *CORE_FRACTION_LIMITS)
    )
    crust_thickness = float(
        np.clip(
            radius_m * BASE_CRUST_FRACTION * (1 + 0.1 * np.log10(1 + irradiation)),
            MIN_CRUST_THICKNESS_M,
            radius_m * MAX_CRUST_FRACTION,
        )
    )
    core_radius = radius_m * core_fraction
    mantle_thickness = radius_m - core_radius - crust_thickness

    # Layer boundaries from the centre outwards; shell volumes by difference
    boundaries = np.array([0.0, core_radius, radius_m - crust_thickness, radius_m])
    core_volume, mantle_volume, crust_volume = np.diff(4.0 / 3.0 * np.pi * boundaries**3)

    return GeologicalData(
        core=CoreLayer(size=core_radius, volume=float(core_volume)),
        mantle=ShellLayer(thickness=mantle_thickness, volume=float(mantle_volume)),
        crust=ShellLayer(thickness=crust_thickness, volume=float(crust_volume)),
    )


def planet_geology(star: Star, planet: Planet) -> GeologicalData:
    """Interior of ``planet`` around ``star``."""
    if planet.planet_type is None:
        raise ValueError("Planet has no assigned type")
    if star.luminosity <= 0:
        raise ValueError(f"Star luminosity must be positive, got {star.luminosity}")
    return generate_geological_data(planet.size, planet.orbit_radius, star.size, star.mass)


def determine_planetary_composition(planet_type, geology: GeologicalData) -> Dict[str, float]:
    """
    Crust mass per element, in kg.

    Unknown planet types use the Terrestrial crust.
    """
    try:
        planet_type = PlanetType(planet_type)
    except ValueError:
        planet_type = PlanetType.TERRESTRIAL

    crust_mass = geology.crust.volume * CRUST_DENSITY[planet_type]
    fractions = CRUST_ELEMENT_FRACTIONS[planet_type]
    return {symbol: crust_mass * fraction for symbol, fraction in fractions.items()}
