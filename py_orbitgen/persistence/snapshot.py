"""
Portable system snapshots.

A snapshot keeps only the fields that cannot be recomputed: the star's
class, size, mass and luminosity, and each planet's type, orbit, size,
tilt, moon count and tidal lock flag. It is serialised as JSON and carried
as base64 text. Atmosphere, interior and temperature are recomputed on
restore.
"""

from __future__ import annotations

import base64
import zlib
from typing import List, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field

from ..core.habitable_zone import calculate_habitable_zone
from ..core.names import generate_system_name
from ..core.planets import Planet, PlanetType, planet_atmosphere
from ..core.splitmix_prng import SplitMix32
from ..core.star import SpectralClass, Star
from ..core.universe import UniverseData, build_planet_record

logger = structlog.get_logger()

INVALID_DATA_FORMAT = "Invalid data format"


class SnapshotFormatError(ValueError):
    """Raised when snapshot text cannot be decoded into a valid system."""

    def __init__(self, message: str = INVALID_DATA_FORMAT):
        super().__init__(message)


class SnapshotStar(BaseModel):
    """Persisted parent star."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    type: SpectralClass = Field(description="Spectral class")
    size: float = Field(gt=0, description="Radius in solar radii")
    mass: float = Field(gt=0, description="Mass in solar masses")
    luminosity: float = Field(gt=0, description="Luminosity in solar units")


class SnapshotPlanet(BaseModel):
    """Persisted planet."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    type: PlanetType = Field(description="Planet type")
    orbit_radius: float = Field(gt=0, alias="orbitRadius", description="Orbit radius in AU")
    size: float = Field(gt=0, description="Radius in Earth radii")
    axial_tilt: float = Field(alias="axialTilt", description="Axial tilt in degrees")
    moons: int = Field(ge=0, description="Number of moons")
    is_tidally_locked: bool = Field(
        default=False, alias="isTidallyLocked", description="Tidal lock flag"
    )


class SystemSnapshot(BaseModel):
    """Reduced, persistable view of a star system."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    parent_star: SnapshotStar = Field(alias="parentStar")
    solar_system: List[SnapshotPlanet] = Field(alias="solarSystem", min_length=1)


def to_snapshot(universe: UniverseData) -> SystemSnapshot:
    """Reduce populated system data to its persisted fields."""
    star = universe.parent_star
    return SystemSnapshot(
        parent_star=SnapshotStar(
            type=star.spectral_class,
            size=star.size,
            mass=star.mass,
            luminosity=star.luminosity,
        ),
        solar_system=[
            SnapshotPlanet(
                type=record.planet.planet_type,
                orbit_radius=record.planet.orbit_radius,
                size=record.planet.size,
                axial_tilt=record.planet.axial_tilt,
                moons=record.planet.moons,
                is_tidally_locked=record.is_tidally_locked,
            )
            for record in universe.planets
        ],
    )


def encode_snapshot(snapshot: SystemSnapshot) -> str:
    """Serialise to JSON and wrap in base64."""
    data = snapshot.model_dump_json(by_alias=True)
    return base64.b64encode(data.encode("utf-8")).decode("ascii")


def decode_snapshot(text: str) -> SystemSnapshot:
    """
    Parse snapshot text.

    Raises:
        SnapshotFormatError: for any malformed input, without structural detail
    """
    try:
        data = base64.b64decode("".join(text.split()), validate=True).decode("utf-8")
        return SystemSnapshot.model_validate_json(data)
    except ValueError as e:
        logger.error("Failed to import snapshot", error=str(e))
        raise SnapshotFormatError() from e


def restore_universe(
    snapshot: SystemSnapshot,
    prng: Optional[SplitMix32] = None,
    system_name: Optional[str] = None,
) -> UniverseData:
    """
    Rebuild populated system data from a snapshot.

    The habitable zone comes from the stored luminosity and age is not
    persisted (restored as 0). Atmospheres and rotation are redrawn from
    ``prng``; by default that stream is seeded from the snapshot content so
    the same snapshot always restores identically.
    """
    if prng is None:
        prng = SplitMix32(zlib.crc32(encode_snapshot(snapshot).encode("ascii")))

    stored = snapshot.parent_star
    star = Star(
        spectral_class=stored.type,
        age=0.0,
        size=stored.size,
        mass=stored.mass,
        luminosity=stored.luminosity,
        habitable_zone=calculate_habitable_zone(stored.luminosity),
    )

    entries = sorted(snapshot.solar_system, key=lambda p: p.orbit_radius)
    planets = [
        Planet(
            planet_type=entry.type,
            orbit_radius=entry.orbit_radius,
            size=entry.size,
            moons=entry.moons,
            axial_tilt=entry.axial_tilt,
            atmosphere=planet_atmosphere(
                entry.type, entry.orbit_radius, star.habitable_zone, prng
            ),
        )
        for entry in entries
    ]

    name = system_name or generate_system_name(prng)
    outer_edge = planets[-1].orbit_radius
    records = [
        build_planet_record(
            star, planet, i, name, outer_edge, prng, tidally_locked=entry.is_tidally_locked
        )
        for i, (planet, entry) in enumerate(zip(planets, entries))
    ]
    logger.info("Restored system from snapshot", system_name=name, planets=len(records))
    return UniverseData(
        system_name=name,
        parent_star=star,
        planets=records,
        system_outer_edge=outer_edge,
    )
