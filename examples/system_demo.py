"""
Example generating a star system and printing its planets.
"""

import sys

from py_orbitgen.core import SplitMix32, generate_orbit, populate_universe
from py_orbitgen.core.atmosphere import format_atmosphere
from py_orbitgen.persistence.snapshot import (
    decode_snapshot,
    encode_snapshot,
    restore_universe,
    to_snapshot,
)


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 42

    result = generate_orbit(prng=SplitMix32(seed))
    universe = populate_universe(result, prng=SplitMix32(seed))
    star = universe.parent_star
    zone = universe.habitable_zone

    print(f"System {universe.system_name} (seed {seed})")
    print(
        f"Star: class {star.spectral_class.value}, age {star.age:.2f} Gyr, "
        f"size {star.size:.2f} R☉, mass {star.mass:.2f} M☉, "
        f"luminosity {star.luminosity:.3f} L☉"
    )
    print(f"Habitable zone: {zone.inner_boundary:.3f} - {zone.outer_boundary:.3f} AU")
    print()

    for record in universe.planets:
        planet = record.planet
        marker = " *" if record.in_habitable_zone else ""
        print(f"{record.name}: {planet.planet_type.value}{marker}")
        print(f"  Orbit: {planet.orbit_radius:.3f} AU, size {planet.size:.2f} R⊕, moons {planet.moons}")
        print(f"  Atmosphere: {format_atmosphere(planet.atmosphere)} ({record.atmosphere_composition})")
        print(f"  Surface temperature: {record.surface_temperature:.1f}°C")
        print(
            f"  Day: {record.day_length_hours:.1f} h, year: {record.year_length_days:.1f} days"
            f"{', tidally locked' if record.is_tidally_locked else ''}"
        )
        if record.hospitable:
            print("  Hospitable")

    # Export and restore
    data = encode_snapshot(to_snapshot(universe))
    restored = restore_universe(decode_snapshot(data))
    print()
    print(f"Snapshot: {len(data)} characters")
    print(f"Restored {len(restored.planets)} planets as {restored.system_name}")


if __name__ == "__main__":
    main()
