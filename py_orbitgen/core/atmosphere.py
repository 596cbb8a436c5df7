"""
Atmosphere detail and surface temperature.

This module implements:
- Gas mixtures behind each atmosphere variant, for display
- Radiative equilibrium temperature from the parent star
- Greenhouse warming per atmosphere variant
- The hospitability check combining zone, atmosphere and temperature

All functions are pure so results can be recomputed from a persisted system.
"""

import math
from typing import Dict, List, Tuple

import numpy as np

from .habitable_zone import HabitableZone, is_in_habitable_zone
from .planets import UNKNOWN_ATMOSPHERE, Planet, atmosphere_family
from .star import Star, star_temperature

SOLAR_TEMPERATURE_K = 5772.0
SOLAR_RADIUS_AU = 0.00465047
KELVIN_OFFSET = 273.15

HOSPITABLE_ATMOSPHERE = "nitrogen_type_III"
HOSPITABLE_TEMPERATURE_RANGE = (-80.0, 80.0)  # °C

# Volume percentages per variant
ATMOSPHERE_COMPOSITIONS: Dict[str, List[Tuple[str, float]]] = {
    "trace": [("Oxygen", 42), ("Sodium", 29), ("Hydrogen", 22), ("Helium", 6), ("Potassium", 1)],
    "carbon_dioxide_type_I": [
        ("Carbon Dioxide", 95),
        ("Nitrogen", 2.8),
        ("Argon", 2),
        ("Oxygen", 0.2),
    ],
    "carbon_dioxide_type_II": [("Carbon Dioxide", 96.5), ("Nitrogen", 3.5)],
    "hydrogen_helium_type_I": [("Hydrogen", 90), ("Helium", 10)],
    "hydrogen_helium_type_II": [("Hydrogen", 96), ("Helium", 3), ("Methane", 1)],
    "hydrogen_helium_type_III": [("Hydrogen", 80), ("Helium", 19), ("Methane", 1)],
    "ice_type_I": [("Hydrogen", 83), ("Helium", 15), ("Methane", 2)],
    "ice_type_II": [("Hydrogen", 80), ("Helium", 18.5), ("Methane", 1.5)],
    "nitrogen_type_I": [("Nitrogen", 95), ("Methane", 5)],
    "nitrogen_type_II": [("Nitrogen", 85), ("Carbon Dioxide", 10), ("Argon", 5)],
    "nitrogen_type_III": [("Nitrogen", 78), ("Oxygen", 21), ("Argon", 1)],
    "carbon_type_I": [("Carbon Monoxide", 60), ("Methane", 25), ("Carbon Dioxide", 15)],
    "ammonia_type_I": [("Ammonia", 70), ("Nitrogen", 20), ("Water Vapor", 10)],
}

# Bond albedo per gas family
FAMILY_ALBEDO: Dict[str, float] = {
    "trace": 0.12,
    "carbon_dioxide": 0.25,
    "hydrogen_helium": 0.34,
    "ice": 0.30,
    "nitrogen": 0.30,
    "carbon": 0.20,
    "ammonia": 0.35,
    UNKNOWN_ATMOSPHERE: 0.30,
}

# Greenhouse warming in Kelvin for an Earth-sized planet
GREENHOUSE_WARMING: Dict[str, float] = {
    "trace": 2,
    "carbon_dioxide_type_I": 80,
    "carbon_dioxide_type_II": 250,
    "hydrogen_helium_type_I": 40,
    "hydrogen_helium_type_II": 60,
    "hydrogen_helium_type_III": 80,
    "ice_type_I": 10,
    "ice_type_II": 25,
    "nitrogen_type_I": 20,
    "nitrogen_type_II": 33,
    "nitrogen_type_III": 33,
    "carbon_type_I": 120,
    "ammonia_type_I": 45,
}

# Planet sizes (Earth radii) over which greenhouse retention scales
_SIZE_CLIP = (0.1, 4.0)


def format_atmosphere(variant: str) -> str:
    """Human readable variant name, e.g. ``nitrogen_type_III`` -> ``Nitrogen Type III``."""
    return " ".join(word[:1].upper() + word[1:] for word in variant.split("_"))


def atmosphere_details(variant: str) -> str:
    """Comma separated gas mixture of a variant."""
    composition = ATMOSPHERE_COMPOSITIONS.get(variant)
    if composition is None:
        return "Unknown composition"
    return ", ".join(f"{gas}: {pct:g}%" for gas, pct in composition)


def calculate_surface_temperature(
    luminosity: float,
    star_temp: float,
    orbit_radius: float,
    planet_size: float,
    atmosphere: str,
) -> float:
    """
    Estimate the mean surface temperature of a planet.

    The stellar radius follows from luminosity and effective temperature,
    the equilibrium temperature from the stellar radius and orbit, and the
    greenhouse term grows with planet size.

    Args:
        luminosity: Stellar luminosity in solar units
        star_temp: Stellar effective temperature in Kelvin
        orbit_radius: Orbit radius in AU
        planet_size: Planet radius in Earth radii
        atmosphere: Atmosphere variant

    Returns:
        Surface temperature in °C
    """
    if luminosity <= 0:
        raise ValueError(f"Star luminosity must be positive, got {luminosity}")
    if star_temp <= 0:
        raise ValueError(f"Star temperature must be positive, got {star_temp}")
    if orbit_radius <= 0:
        raise ValueError(f"Orbit radius must be positive, got {orbit_radius}")

    star_radius_au = math.sqrt(luminosity) * (SOLAR_TEMPERATURE_K / star_temp) ** 2 * SOLAR_RADIUS_AU
    albedo = FAMILY_ALBEDO[atmosphere_family(atmosphere)]
    equilibrium = star_temp * math.sqrt(star_radius_au / (2 * orbit_radius)) * (1 - albedo) ** 0.25

    size_factor = float(np.clip(planet_size, *_SIZE_CLIP)) ** 0.25
    greenhouse = GREENHOUSE_WARMING.get(atmosphere, 0.0) * size_factor

    return equilibrium + greenhouse - KELVIN_OFFSET


def _require_typed(planet: Planet) -> None:
    if planet.planet_type is None:
        raise ValueError("Planet has no assigned type")


def planet_surface_temperature(star: Star, planet: Planet) -> float:
    """Surface temperature of ``planet`` around ``star`` in °C."""
    _require_typed(planet)
    return calculate_surface_temperature(
        star.luminosity,
        star_temperature(star.spectral_class),
        planet.orbit_radius,
        planet.size,
        planet.atmosphere,
    )


def is_hospitable(planet: Planet, zone: HabitableZone, surface_temperature: float) -> bool:
    """In the habitable zone, breathable atmosphere and survivable temperature."""
    low, high = HOSPITABLE_TEMPERATURE_RANGE
    return (
        is_in_habitable_zone(planet.orbit_radius, zone)
        and planet.atmosphere == HOSPITABLE_ATMOSPHERE
        and low <= surface_temperature <= high
    )
