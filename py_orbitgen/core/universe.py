"""
Populated system data.

Wraps a generation result with the properties consumers cache per planet:
name, rotation, orbital speed, tidal locking, interior, crust composition,
atmosphere detail, surface temperature and hospitability. Derived fields
are recomputed from the generated records, never stored by the generator.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import structlog

from ..utils.random import get_cosmetic_prng
from .atmosphere import atmosphere_details, is_hospitable, planet_surface_temperature
from .dynamics import (
    is_tidally_locked,
    local_days_per_orbit,
    orbital_speed,
    orbital_speed_to_earth_days,
    rotation_speed,
    rotation_speed_to_earth_hours,
)
from .geology import GeologicalData, determine_planetary_composition, planet_geology
from .habitable_zone import HabitableZone, is_in_habitable_zone
from .names import generate_system_name, planet_name
from .planets import Planet
from .solar_system import OrbitResult
from .splitmix_prng import SplitMix32
from .star import Star

logger = structlog.get_logger()


@dataclass
class PlanetRecord:
    """A generated planet together with its cached derived properties."""

    name: str
    planet: Planet
    rotation_speed: float
    orbital_speed: float
    is_tidally_locked: bool
    geological_data: GeologicalData
    composition: Dict[str, float]
    atmosphere_composition: str
    surface_temperature: float
    in_habitable_zone: bool
    hospitable: bool

    @property
    def day_length_hours(self) -> float:
        return rotation_speed_to_earth_hours(self.rotation_speed)

    @property
    def year_length_days(self) -> float:
        return orbital_speed_to_earth_days(self.orbital_speed, self.planet.orbit_radius)

    @property
    def local_days_per_year(self) -> float:
        return local_days_per_orbit(
            self.rotation_speed, self.orbital_speed, self.planet.orbit_radius
        )


@dataclass
class UniverseData:
    """Everything a consumer displays for one star system."""

    system_name: str
    parent_star: Star
    planets: List[PlanetRecord] = field(default_factory=list)
    system_outer_edge: float = 0.0

    @property
    def habitable_zone(self) -> HabitableZone:
        return self.parent_star.habitable_zone

    @property
    def solar_system(self) -> List[Planet]:
        return [record.planet for record in self.planets]

    def planet_details(self, index: int) -> PlanetRecord:
        """Planet record at ``index``; negative indexes are rejected."""
        if index < 0 or index >= len(self.planets):
            raise IndexError(f"Invalid planet index {index} for {len(self.planets)} planets")
        return self.planets[index]


def build_planet_record(
    star: Star,
    planet: Planet,
    index: int,
    system_name: str,
    system_outer_edge: float,
    prng: SplitMix32,
    tidally_locked: Optional[bool] = None,
) -> PlanetRecord:
    """
    Compute every cached property of one planet.

    Args:
        star: Parent star
        planet: Generated planet
        index: Zero-based position in the sorted system
        system_name: Designation of the system
        system_outer_edge: Orbit radius of the outermost planet
        prng: Cosmetic stream for rotation and tidal locking
        tidally_locked: Persisted tidal lock flag, drawn when omitted
    """
    if tidally_locked is None:
        tidally_locked = is_tidally_locked(prng)

    geology = planet_geology(star, planet)
    temperature = planet_surface_temperature(star, planet)

    return PlanetRecord(
        name=planet_name(system_name, index + 1),
        planet=planet,
        rotation_speed=rotation_speed(
            planet.orbit_radius, star.habitable_zone, system_outer_edge, prng
        ),
        orbital_speed=orbital_speed(planet.orbit_radius),
        is_tidally_locked=tidally_locked,
        geological_data=geology,
        composition=determine_planetary_composition(planet.planet_type, geology),
        atmosphere_composition=atmosphere_details(planet.atmosphere),
        surface_temperature=temperature,
        in_habitable_zone=is_in_habitable_zone(planet.orbit_radius, star.habitable_zone),
        hospitable=is_hospitable(planet, star.habitable_zone, temperature),
    )


def populate_universe(
    result: OrbitResult,
    prng: Optional[SplitMix32] = None,
    system_name: Optional[str] = None,
) -> UniverseData:
    """
    Attach derived properties to every planet of a generated system.

    Args:
        result: Output of ``generate_orbit``
        prng: Cosmetic stream, defaults to the shared cosmetic stream
        system_name: Designation to use, generated when omitted

    Returns:
        UniverseData for the system
    """
    prng = prng or get_cosmetic_prng()
    star = result.parent_star
    system_name = system_name or generate_system_name(prng)
    outer_edge = result.solar_system[-1].orbit_radius if result.solar_system else 0.0

    records = [
        build_planet_record(star, planet, i, system_name, outer_edge, prng)
        for i, planet in enumerate(result.solar_system)
    ]

    logger.info(
        "Populated system",
        system_name=system_name,
        planets=len(records),
        hospitable=sum(1 for r in records if r.hospitable),
    )
    return UniverseData(
        system_name=system_name,
        parent_star=star,
        planets=records,
        system_outer_edge=outer_edge,
    )
