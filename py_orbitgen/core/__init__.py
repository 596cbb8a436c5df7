"""
Core star system generation functionality.
"""

from .splitmix_prng import SplitMix32
from .habitable_zone import HabitableZone, calculate_habitable_zone, is_in_habitable_zone
from .star import SpectralClass, Star, generate_star
from .orbits import layout_orbits
from .planets import Planet, PlanetType, classify_planet
from .solar_system import GenerationOptions, OrbitResult, generate_orbit
from .atmosphere import atmosphere_details, calculate_surface_temperature
from .geology import GeologicalData, generate_geological_data
from .universe import UniverseData, populate_universe

__all__ = ['SplitMix32', 'HabitableZone', 'calculate_habitable_zone', 'is_in_habitable_zone',
           'SpectralClass', 'Star', 'generate_star', 'layout_orbits',
           'Planet', 'PlanetType', 'classify_planet',
           'GenerationOptions', 'OrbitResult', 'generate_orbit',
           'atmosphere_details', 'calculate_surface_temperature',
           'GeologicalData', 'generate_geological_data',
           'UniverseData', 'populate_universe']
