"""FastAPI main application."""

from typing import Dict, List, Optional

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ..config import settings
from ..core.atmosphere import format_atmosphere
from ..core.solar_system import GenerationOptions, generate_orbit
from ..core.splitmix_prng import SplitMix32, time_seed
from ..core.star import Star
from ..core.universe import PlanetRecord, UniverseData, populate_universe
from ..persistence.snapshot import (
    SnapshotFormatError,
    decode_snapshot,
    encode_snapshot,
    restore_universe,
    to_snapshot,
)
from ..utils.logging import configure_logging

configure_logging(settings)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Orbit Generator API",
    description="Procedural star system generation",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class SystemGenerationRequest(BaseModel):
    """Request to generate a star system."""

    seed: Optional[int] = Field(None, description="Seed for reproducible generation")
    cosmetic_seed: Optional[int] = Field(
        None, description="Seed for names, rotation and tidal locking (defaults to seed)"
    )
    reclassify_relocated: bool = Field(
        False, description="Re-derive a planet moved into the habitable zone"
    )


class SnapshotImportRequest(BaseModel):
    """Request carrying an exported snapshot string."""

    data: str = Field(..., description="Base64 snapshot text")


class SnapshotResponse(BaseModel):
    seed: int
    system_name: str
    data: str


class HabitableZoneResponse(BaseModel):
    inner_boundary: float
    outer_boundary: float


class StarResponse(BaseModel):
    """Parent star properties."""

    type: str
    age: float
    size: float
    mass: float
    luminosity: float
    temperature: float
    habitable_zone: HabitableZoneResponse


class PlanetResponse(BaseModel):
    """Planet properties, derived fields included."""

    index: int
    name: str
    type: str
    orbit_radius: float
    size: float
    moons: int
    axial_tilt: float
    atmosphere: str
    atmosphere_name: str
    atmosphere_composition: List[str]
    surface_temperature: float
    in_habitable_zone: bool
    hospitable: bool
    is_tidally_locked: bool
    day_length_hours: float
    year_length_days: float
    local_days_per_year: float
    geological_data: Dict[str, Dict[str, float]]
    composition: Dict[str, float]


class SystemResponse(BaseModel):
    """A generated or restored star system."""

    seed: Optional[int] = None
    system_name: str
    parent_star: StarResponse
    planets: List[PlanetResponse]
    system_outer_edge: float


def _star_response(star: Star) -> StarResponse:
    return StarResponse(
        type=star.spectral_class.value,
        age=star.age,
        size=star.size,
        mass=star.mass,
        luminosity=star.luminosity,
        temperature=star.temperature,
        habitable_zone=HabitableZoneResponse(
            inner_boundary=star.habitable_zone.inner_boundary,
            outer_boundary=star.habitable_zone.outer_boundary,
        ),
    )


def _planet_response(index: int, record: PlanetRecord) -> PlanetResponse:
    planet = record.planet
    return PlanetResponse(
        index=index,
        name=record.name,
        type=planet.planet_type.value,
        orbit_radius=planet.orbit_radius,
        size=planet.size,
        moons=planet.moons,
        axial_tilt=planet.axial_tilt,
        atmosphere=planet.atmosphere,
        atmosphere_name=format_atmosphere(planet.atmosphere),
        atmosphere_composition=record.atmosphere_composition.split(", "),
        surface_temperature=record.surface_temperature,
        in_habitable_zone=record.in_habitable_zone,
        hospitable=record.hospitable,
        is_tidally_locked=record.is_tidally_locked,
        day_length_hours=record.day_length_hours,
        year_length_days=record.year_length_days,
        local_days_per_year=record.local_days_per_year,
        geological_data=record.geological_data.to_dict(),
        composition=record.composition,
    )


def _system_response(universe: UniverseData, seed: Optional[int] = None) -> SystemResponse:
    return SystemResponse(
        seed=seed,
        system_name=universe.system_name,
        parent_star=_star_response(universe.parent_star),
        planets=[_planet_response(i, r) for i, r in enumerate(universe.planets)],
        system_outer_edge=universe.system_outer_edge,
    )


def _build_universe(
    seed: Optional[int],
    cosmetic_seed: Optional[int] = None,
    reclassify_relocated: bool = False,
):
    """Generate and populate a system on private streams."""
    if seed is None:
        seed = settings.default_seed if settings.default_seed is not None else time_seed()
    if cosmetic_seed is None:
        cosmetic_seed = settings.cosmetic_seed if settings.cosmetic_seed is not None else seed

    result = generate_orbit(
        prng=SplitMix32(seed),
        options=GenerationOptions(reclassify_relocated=reclassify_relocated),
    )
    return seed, populate_universe(result, prng=SplitMix32(cosmetic_seed))


# Event handlers
@app.on_event("startup")
async def startup_event():
    logger.info("Starting Orbit Generator API")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Orbit Generator API")


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Orbit Generator API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/systems/generate", response_model=SystemResponse)
async def generate_system(request: SystemGenerationRequest):
    """Generate a star system with every derived planet property."""
    logger.info("System generation requested", request=request.model_dump())
    seed, universe = _build_universe(
        request.seed, request.cosmetic_seed, request.reclassify_relocated
    )
    return _system_response(universe, seed)


@app.post("/systems/export", response_model=SnapshotResponse)
async def export_system(request: SystemGenerationRequest):
    """Generate a system and return its portable snapshot."""
    seed, universe = _build_universe(
        request.seed, request.cosmetic_seed, request.reclassify_relocated
    )
    data = encode_snapshot(to_snapshot(universe))
    logger.info("Exported system", seed=seed, system_name=universe.system_name)
    return SnapshotResponse(seed=seed, system_name=universe.system_name, data=data)


@app.post("/systems/import", response_model=SystemResponse)
async def import_system(request: SnapshotImportRequest):
    """Restore a system from a snapshot, recomputing derived properties."""
    try:
        snapshot = decode_snapshot(request.data)
    except SnapshotFormatError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _system_response(restore_universe(snapshot))


@app.get("/systems/{seed}/planets/{index}", response_model=PlanetResponse)
async def get_planet(seed: int, index: int):
    """Details of one planet of the system generated from ``seed``."""
    _, universe = _build_universe(seed)
    try:
        record = universe.planet_details(index)
    except IndexError:
        raise HTTPException(status_code=404, detail="Invalid planet index")
    return _planet_response(index, record)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
