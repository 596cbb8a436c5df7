"""
Star system generation pipeline.

Runs the generation stages in order: parent star, habitable zone, orbit
layout, per-slot classification and property sampling, then the
habitability guarantee and the final sort by distance from the star.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import structlog

from ..utils.random import get_prng, set_random_seed
from .habitable_zone import HabitableZone, is_in_habitable_zone
from .orbits import MAX_PLANETS, MIN_PLANETS, layout_orbits
from .planets import Planet, generate_planet
from .splitmix_prng import SplitMix32
from .star import Star, generate_star

logger = structlog.get_logger()


@dataclass
class GenerationOptions:
    """Star system generation options."""

    # Re-derive type and sampled properties of a planet moved into the
    # habitable zone. Enabling this changes output distributions.
    reclassify_relocated: bool = False


@dataclass
class OrbitResult:
    """A generated parent star with its planets sorted by orbit radius."""

    parent_star: Star
    solar_system: List[Planet] = field(default_factory=list)

    @property
    def habitable_zone(self) -> HabitableZone:
        return self.parent_star.habitable_zone

    def habitable_planets(self) -> List[Planet]:
        return [
            p for p in self.solar_system
            if is_in_habitable_zone(p.orbit_radius, self.habitable_zone)
        ]


def ensure_habitable_planet(
    planets: List[Planet],
    zone: HabitableZone,
    prng: SplitMix32,
) -> Optional[Planet]:
    """
    Move one random planet to the habitable zone midpoint if none is inside.

    The moved planet is not reclassified.

    Returns:
        The relocated planet, or None when no move was needed
    """
    if not planets:
        return None
    if any(is_in_habitable_zone(p.orbit_radius, zone) for p in planets):
        return None

    planet = prng.choice(planets)
    old_radius = planet.orbit_radius
    planet.orbit_radius = zone.midpoint
    logger.warning(
        "No planet in habitable zone, relocating one",
        planet_type=planet.planet_type.value if planet.planet_type else None,
        from_radius=round(old_radius, 4),
        to_radius=round(planet.orbit_radius, 4),
    )
    return planet


def generate_solar_system(
    star: Star,
    prng: SplitMix32,
    options: Optional[GenerationOptions] = None,
) -> List[Planet]:
    """
    Generate the planets orbiting ``star``.

    Args:
        star: Parent star with its habitable zone set
        prng: Generation stream
        options: Generation options

    Returns:
        Planets sorted ascending by orbit radius
    """
    options = options or GenerationOptions()

    planet_count = prng.int_range(MIN_PLANETS, MAX_PLANETS)
    radii = layout_orbits(star, planet_count)
    logger.info("Laying out orbits", planet_count=planet_count, outermost=round(radii[-1], 3))

    planets = []
    for radius in radii:
        planet = generate_planet(star, radius, prng)
        logger.debug(
            "Generated planet",
            planet_type=planet.planet_type.value,
            orbit_radius=round(radius, 4),
            size=round(planet.size, 3),
            moons=planet.moons,
        )
        planets.append(planet)

    relocated = ensure_habitable_planet(planets, star.habitable_zone, prng)
    if relocated is not None and options.reclassify_relocated:
        rederived = generate_planet(star, relocated.orbit_radius, prng)
        relocated.planet_type = rederived.planet_type
        relocated.size = rederived.size
        relocated.atmosphere = rederived.atmosphere
        relocated.moons = rederived.moons
        relocated.axial_tilt = rederived.axial_tilt

    planets.sort(key=lambda p: p.orbit_radius)
    return planets


def generate_orbit(
    seed: Optional[int] = None,
    prng: Optional[SplitMix32] = None,
    options: Optional[GenerationOptions] = None,
) -> OrbitResult:
    """
    Generate a full star system.

    Args:
        seed: Optional seed; reseeds ``prng`` (or the shared stream) first
        prng: Stream to draw from, defaults to the shared generation stream
        options: Generation options

    Returns:
        OrbitResult with the parent star and its sorted planets
    """
    if seed is not None:
        if prng is not None:
            prng.seed(seed)
        else:
            set_random_seed(seed)
    prng = prng or get_prng()

    logger.info("Generating star system", seed=prng.initial_seed)
    star = generate_star(prng=prng)
    planets = generate_solar_system(star, prng, options)

    result = OrbitResult(parent_star=star, solar_system=planets)
    logger.info(
        "Star system generated",
        spectral_class=star.spectral_class.value,
        planets=len(planets),
        habitable=len(result.habitable_planets()),
        draws=prng.call_count,
    )
    return result
