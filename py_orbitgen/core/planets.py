"""
Planet classification and per-type property sampling.

This module implements:
- Orbit-based planet typing relative to the habitable zone
- Size, moon count and axial tilt bands per planet type
- Atmosphere variant selection from named gas-family pools
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from .habitable_zone import HabitableZone, is_in_habitable_zone
from .splitmix_prng import SplitMix32
from .star import Star


class PlanetType(str, Enum):
    """Planet types; values are the display names used in snapshots."""

    LAVA = "Lava Planet"
    TERRESTRIAL = "Terrestrial"
    OCEAN = "Ocean World"
    GAS_GIANT = "Gas Giant"
    ICE_GIANT = "Ice Giant"
    DWARF = "Dwarf Planet"


@dataclass
class Planet:
    """A generated planet."""

    planet_type: Optional[PlanetType]
    orbit_radius: float  # AU
    size: float  # Earth radii
    moons: int
    axial_tilt: float  # Degrees
    atmosphere: str


# Earth radii
PLANET_SIZE_RANGES: Dict[PlanetType, Tuple[float, float]] = {
    PlanetType.LAVA: (0.3, 1),
    PlanetType.TERRESTRIAL: (0.5, 1.5),
    PlanetType.OCEAN: (0.8, 2),
    PlanetType.GAS_GIANT: (6, 15),
    PlanetType.ICE_GIANT: (5, 14),
    PlanetType.DWARF: (0.1, 0.3),
}
DEFAULT_PLANET_SIZE = 1.0

# Inclusive integer bands
MOON_COUNT_RANGES: Dict[PlanetType, Tuple[int, int]] = {
    PlanetType.TERRESTRIAL: (0, 3),
    PlanetType.OCEAN: (0, 2),
    PlanetType.GAS_GIANT: (1, 80),
    PlanetType.ICE_GIANT: (1, 50),
    PlanetType.LAVA: (0, 2),
    PlanetType.DWARF: (0, 5),
}

# Degrees
AXIAL_TILT_RANGES: Dict[PlanetType, Tuple[float, float]] = {
    PlanetType.DWARF: (0, 30),
    PlanetType.TERRESTRIAL: (0, 25),
    PlanetType.OCEAN: (10, 30),
    PlanetType.LAVA: (0, 40),
    PlanetType.GAS_GIANT: (15, 90),
    PlanetType.ICE_GIANT: (10, 90),
}

ATMOSPHERE_FAMILIES: Dict[str, List[str]] = {
    "trace": ["trace"],
    "carbon_dioxide": ["carbon_dioxide_type_I", "carbon_dioxide_type_II"],
    "hydrogen_helium": [
        "hydrogen_helium_type_I",
        "hydrogen_helium_type_II",
        "hydrogen_helium_type_III",
    ],
    "ice": ["ice_type_I", "ice_type_II"],
    "nitrogen": ["nitrogen_type_I", "nitrogen_type_II", "nitrogen_type_III"],
    "carbon": ["carbon_type_I"],
    "ammonia": ["ammonia_type_I"],
}
UNKNOWN_ATMOSPHERE = "unknown"

# Classification band offsets, AU
GAS_GIANT_BAND_AU = 15
ICE_GIANT_OFFSET_AU = 5
ICE_GIANT_LIMIT_AU = 30

ClassificationRule = Tuple[Callable[[float, HabitableZone], bool], Optional[PlanetType]]

# Evaluated in order, first match wins. The Gas Giant and Ice Giant bands
# overlap; the overlap resolves to Gas Giant. A ``None`` result marks the
# habitable band, settled by a coin flip.
CLASSIFICATION_RULES: List[ClassificationRule] = [
    (lambda r, hz: r < hz.inner_boundary, PlanetType.LAVA),
    (lambda r, hz: hz.inner_boundary <= r <= hz.outer_boundary, None),
    (
        lambda r, hz: hz.outer_boundary < r < hz.outer_boundary + GAS_GIANT_BAND_AU,
        PlanetType.GAS_GIANT,
    ),
    (
        lambda r, hz: hz.outer_boundary + ICE_GIANT_OFFSET_AU <= r < ICE_GIANT_LIMIT_AU,
        PlanetType.ICE_GIANT,
    ),
    (lambda r, hz: True, PlanetType.DWARF),
]


def _as_type(planet_type) -> Optional[PlanetType]:
    try:
        return PlanetType(planet_type)
    except ValueError:
        return None


def classify_planet(star: Star, orbit_radius: float, prng: SplitMix32) -> PlanetType:
    """
    Determine a planet's type from its orbit relative to the habitable zone.

    Only the habitable band draws from ``prng`` (Terrestrial vs Ocean World).
    """
    zone = star.habitable_zone
    for predicate, result in CLASSIFICATION_RULES:
        if predicate(orbit_radius, zone):
            if result is None:
                return PlanetType.TERRESTRIAL if prng.random() > 0.5 else PlanetType.OCEAN
            return result
    return PlanetType.DWARF


def planet_size(planet_type, prng: SplitMix32) -> float:
    band = PLANET_SIZE_RANGES.get(_as_type(planet_type))
    if band is None:
        return DEFAULT_PLANET_SIZE
    return prng.range(*band)


def planet_moons(planet_type, prng: SplitMix32) -> int:
    band = MOON_COUNT_RANGES.get(_as_type(planet_type))
    if band is None:
        return 0
    return prng.int_range(*band)


def axial_tilt(planet_type, prng: SplitMix32) -> float:
    """Axial tilt in degrees; unknown types use the Terrestrial band."""
    band = AXIAL_TILT_RANGES.get(_as_type(planet_type), AXIAL_TILT_RANGES[PlanetType.TERRESTRIAL])
    return prng.range(*band)


def atmosphere_candidates(planet_type, orbit_radius: float, zone: HabitableZone) -> List[str]:
    """Candidate atmosphere variants for a planet; empty for unknown types."""
    families = ATMOSPHERE_FAMILIES
    planet_type = _as_type(planet_type)

    if planet_type == PlanetType.TERRESTRIAL:
        if is_in_habitable_zone(orbit_radius, zone):
            return families["carbon_dioxide"] + families["nitrogen"]
        return list(families["carbon_dioxide"])
    if planet_type == PlanetType.OCEAN:
        return families["carbon"] + families["ammonia"] + families["nitrogen"]
    if planet_type == PlanetType.GAS_GIANT:
        return families["hydrogen_helium"] + [families["carbon"][0]]
    if planet_type == PlanetType.ICE_GIANT:
        return families["ice"] + [families["ammonia"][0]]
    if planet_type == PlanetType.LAVA:
        return list(families["carbon_dioxide"])
    if planet_type == PlanetType.DWARF:
        return families["trace"] + families["carbon_dioxide"]
    return []


def planet_atmosphere(
    planet_type, orbit_radius: float, zone: HabitableZone, prng: SplitMix32
) -> str:
    """Pick an atmosphere variant uniformly from the type's candidates."""
    candidates = atmosphere_candidates(planet_type, orbit_radius, zone)
    if not candidates:
        return UNKNOWN_ATMOSPHERE
    return prng.choice(candidates)


def atmosphere_family(variant: str) -> str:
    """Gas family a variant belongs to, ``"unknown"`` if none."""
    for family, variants in ATMOSPHERE_FAMILIES.items():
        if variant in variants:
            return family
    return UNKNOWN_ATMOSPHERE


def generate_planet(star: Star, orbit_radius: float, prng: SplitMix32) -> Planet:
    """
    Classify one orbit slot and sample its properties.

    Draw order: type, size, atmosphere, moons, tilt.
    """
    planet_type = classify_planet(star, orbit_radius, prng)
    size = planet_size(planet_type, prng)
    atmosphere = planet_atmosphere(planet_type, orbit_radius, star.habitable_zone, prng)
    moons = planet_moons(planet_type, prng)
    tilt = axial_tilt(planet_type, prng)

    return Planet(
        planet_type=planet_type,
        orbit_radius=orbit_radius,
        size=size,
        moons=moons,
        axial_tilt=tilt,
        atmosphere=atmosphere,
    )
