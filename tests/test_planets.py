"""Tests for planet classification and property sampling."""

import pytest

from py_orbitgen.core.habitable_zone import HabitableZone, calculate_habitable_zone
from py_orbitgen.core.planets import (
    ATMOSPHERE_FAMILIES,
    AXIAL_TILT_RANGES,
    MOON_COUNT_RANGES,
    PLANET_SIZE_RANGES,
    PlanetType,
    atmosphere_candidates,
    atmosphere_family,
    axial_tilt,
    classify_planet,
    generate_planet,
    planet_atmosphere,
    planet_moons,
    planet_size,
)
from py_orbitgen.core.splitmix_prng import SplitMix32
from py_orbitgen.core.star import SpectralClass, Star


def star_with_zone(inner, outer):
    return Star(
        spectral_class=SpectralClass.G,
        age=1.0,
        size=1.0,
        mass=1.0,
        luminosity=1.0,
        habitable_zone=HabitableZone(inner, outer),
    )


class TestClassification:
    """Test ordered-branch planet typing."""

    @pytest.fixture
    def sun_like(self):
        return star_with_zone(0.953, 1.374)

    def test_lava_inside_inner_boundary(self, sun_like):
        """Test orbits inside the zone are lava planets."""
        assert classify_planet(sun_like, 0.2, SplitMix32(1)) == PlanetType.LAVA

    def test_habitable_band_terrestrial_or_ocean(self, sun_like):
        """Test the habitable band yields both rocky types."""
        prng = SplitMix32(5)
        seen = {classify_planet(sun_like, 1.0, prng) for _ in range(100)}
        assert seen == {PlanetType.TERRESTRIAL, PlanetType.OCEAN}

    def test_habitable_boundaries_inclusive(self, sun_like):
        """Test both zone boundaries classify as habitable types."""
        rocky = {PlanetType.TERRESTRIAL, PlanetType.OCEAN}
        assert classify_planet(sun_like, 0.953, SplitMix32(1)) in rocky
        assert classify_planet(sun_like, 1.374, SplitMix32(1)) in rocky

    def test_coin_flip_uses_stream(self, sun_like):
        """Test the habitable coin flip is reproducible per seed."""
        a = [classify_planet(sun_like, 1.2, SplitMix32(s)) for s in range(50)]
        b = [classify_planet(sun_like, 1.2, SplitMix32(s)) for s in range(50)]
        assert a == b

    def test_gas_giant_band(self, sun_like):
        """Test the band just past the zone."""
        assert classify_planet(sun_like, 1.5, SplitMix32(1)) == PlanetType.GAS_GIANT
        assert classify_planet(sun_like, 16.0, SplitMix32(1)) == PlanetType.GAS_GIANT

    def test_ice_giant_band(self, sun_like):
        """Test orbits past the gas giant band and inside 30 AU."""
        assert classify_planet(sun_like, 1.374 + 15, SplitMix32(1)) == PlanetType.ICE_GIANT
        assert classify_planet(sun_like, 29.9, SplitMix32(1)) == PlanetType.ICE_GIANT

    def test_dwarf_beyond_30(self, sun_like):
        """Test distant orbits are dwarf planets."""
        assert classify_planet(sun_like, 30.0, SplitMix32(1)) == PlanetType.DWARF
        assert classify_planet(sun_like, 45.0, SplitMix32(1)) == PlanetType.DWARF

    def test_overlap_resolves_to_gas_giant(self):
        """Test outer+5 classifies as Gas Giant when outer+15 > 30."""
        outer = 20.0
        star = star_with_zone(13.9, outer)
        prng = SplitMix32(1)

        # outer + 5 also satisfies the Ice Giant bounds only if < 30; here it
        # sits in the overlap with the Gas Giant band, which is checked first
        assert classify_planet(star, outer + 5, prng) == PlanetType.GAS_GIANT
        assert classify_planet(star, 32.0, prng) == PlanetType.GAS_GIANT
        assert classify_planet(star, outer + 15, prng) == PlanetType.DWARF
        # No draws outside the habitable band
        assert prng.call_count == 0

    def test_overlap_small_zone(self):
        """Test the overlap for a small zone where outer+15 < 30."""
        star = star_with_zone(0.1, 1.0)
        # outer+5 <= r < outer+15 is inside both bands
        assert classify_planet(star, 6.0, SplitMix32(1)) == PlanetType.GAS_GIANT
        assert classify_planet(star, 16.0, SplitMix32(1)) == PlanetType.ICE_GIANT

    def test_pure_outside_habitable_band(self):
        """Test classification is a function of zone and radius alone."""
        star = star_with_zone(0.5, 0.9)
        for radius in (0.1, 0.4, 1.0, 10.0, 20.0, 31.0):
            types = {classify_planet(star, radius, SplitMix32(s)) for s in range(10)}
            assert len(types) == 1


class TestPropertySampling:
    """Test per-type property bands."""

    @pytest.mark.parametrize("planet_type", list(PlanetType))
    def test_size_band(self, planet_type):
        """Test sizes stay inside the type band."""
        prng = SplitMix32(3)
        low, high = PLANET_SIZE_RANGES[planet_type]
        for _ in range(200):
            assert low <= planet_size(planet_type, prng) <= high

    @pytest.mark.parametrize("planet_type", list(PlanetType))
    def test_moon_band(self, planet_type):
        """Test moon counts are integers inside the inclusive band."""
        prng = SplitMix32(4)
        low, high = MOON_COUNT_RANGES[planet_type]
        for _ in range(200):
            moons = planet_moons(planet_type, prng)
            assert isinstance(moons, int)
            assert low <= moons <= high

    @pytest.mark.parametrize("planet_type", list(PlanetType))
    def test_tilt_band(self, planet_type):
        """Test axial tilts stay inside the type band."""
        prng = SplitMix32(6)
        low, high = AXIAL_TILT_RANGES[planet_type]
        for _ in range(200):
            assert low <= axial_tilt(planet_type, prng) <= high

    def test_unknown_type_defaults(self):
        """Test unknown types fall back without raising."""
        prng = SplitMix32(8)
        assert planet_size("Rogue", prng) == 1
        assert planet_moons("Rogue", prng) == 0
        assert planet_atmosphere("Rogue", 1.0, HabitableZone(0.9, 1.4), prng) == "unknown"
        assert prng.call_count == 0
        for _ in range(100):
            assert 0 <= axial_tilt("Rogue", prng) <= 25

    def test_accepts_display_names(self):
        """Test lookups accept the snapshot type strings."""
        prng = SplitMix32(9)
        assert 6 <= planet_size("Gas Giant", prng) <= 15


class TestAtmosphere:
    """Test atmosphere candidate pools."""

    @pytest.fixture
    def zone(self):
        return HabitableZone(0.9, 1.4)

    def test_terrestrial_in_zone(self, zone):
        """Test habitable terrestrial planets can get nitrogen atmospheres."""
        candidates = atmosphere_candidates(PlanetType.TERRESTRIAL, 1.0, zone)
        assert candidates == ATMOSPHERE_FAMILIES["carbon_dioxide"] + ATMOSPHERE_FAMILIES["nitrogen"]

    def test_terrestrial_outside_zone(self, zone):
        """Test terrestrial planets outside the zone get carbon dioxide only."""
        candidates = atmosphere_candidates(PlanetType.TERRESTRIAL, 5.0, zone)
        assert candidates == ["carbon_dioxide_type_I", "carbon_dioxide_type_II"]

    def test_type_pools(self, zone):
        """Test pools for the remaining types."""
        assert atmosphere_candidates(PlanetType.OCEAN, 1.0, zone) == [
            "carbon_type_I", "ammonia_type_I",
            "nitrogen_type_I", "nitrogen_type_II", "nitrogen_type_III",
        ]
        assert atmosphere_candidates(PlanetType.GAS_GIANT, 3.0, zone) == [
            "hydrogen_helium_type_I", "hydrogen_helium_type_II",
            "hydrogen_helium_type_III", "carbon_type_I",
        ]
        assert atmosphere_candidates(PlanetType.ICE_GIANT, 20.0, zone) == [
            "ice_type_I", "ice_type_II", "ammonia_type_I",
        ]
        assert atmosphere_candidates(PlanetType.LAVA, 0.3, zone) == [
            "carbon_dioxide_type_I", "carbon_dioxide_type_II",
        ]
        assert atmosphere_candidates(PlanetType.DWARF, 40.0, zone) == [
            "trace", "carbon_dioxide_type_I", "carbon_dioxide_type_II",
        ]

    def test_pools_not_mutated(self, zone):
        """Test building candidates leaves the family table intact."""
        atmosphere_candidates(PlanetType.LAVA, 0.3, zone).append("junk")
        assert ATMOSPHERE_FAMILIES["carbon_dioxide"] == [
            "carbon_dioxide_type_I", "carbon_dioxide_type_II",
        ]

    def test_selection_covers_pool(self, zone):
        """Test every candidate can be drawn."""
        prng = SplitMix32(10)
        seen = {planet_atmosphere(PlanetType.GAS_GIANT, 3.0, zone, prng) for _ in range(300)}
        assert seen == set(atmosphere_candidates(PlanetType.GAS_GIANT, 3.0, zone))

    def test_family_lookup(self):
        """Test variants map back to their family."""
        assert atmosphere_family("nitrogen_type_III") == "nitrogen"
        assert atmosphere_family("trace") == "trace"
        assert atmosphere_family("plasma") == "unknown"


class TestGeneratePlanet:
    """Test single-slot generation."""

    def test_generated_planet_consistent(self):
        """Test a generated planet matches its type bands."""
        star = Star(SpectralClass.G, 4.6, 1.0, 1.0, 1.0, calculate_habitable_zone(1.0))
        prng = SplitMix32(21)
        for radius in (0.3, 1.1, 4.0, 20.0, 40.0):
            planet = generate_planet(star, radius, prng)
            assert planet.orbit_radius == radius
            low, high = PLANET_SIZE_RANGES[planet.planet_type]
            assert low <= planet.size <= high
            assert planet.atmosphere in atmosphere_candidates(
                planet.planet_type, radius, star.habitable_zone
            )

    def test_draw_order(self):
        """Test draws go type, size, atmosphere, moons, tilt."""
        star = Star(SpectralClass.G, 4.6, 1.0, 1.0, 1.0, calculate_habitable_zone(1.0))
        planet = generate_planet(star, 0.3, SplitMix32(42))

        replay = SplitMix32(42)
        # Lava planets skip the coin flip
        assert planet.size == replay.range(0.3, 1)
        assert planet.atmosphere == replay.choice(ATMOSPHERE_FAMILIES["carbon_dioxide"])
        assert planet.moons == replay.int_range(0, 2)
        assert planet.axial_tilt == replay.range(0, 40)
