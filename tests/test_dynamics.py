"""Tests for rotation, orbital speeds and names."""

import math
import re

import pytest

from py_orbitgen.core.dynamics import (
    MAX_ROTATION_SPEED,
    MIN_ROTATION_SPEED,
    is_tidally_locked,
    local_days_per_orbit,
    orbital_speed,
    orbital_speed_to_earth_days,
    rotation_speed,
    rotation_speed_to_earth_hours,
)
from py_orbitgen.core.habitable_zone import HabitableZone
from py_orbitgen.core.names import generate_system_name, planet_name
from py_orbitgen.core.splitmix_prng import SplitMix32
from py_orbitgen.utils.random import set_cosmetic_seed


class TestSpeeds:
    """Test spin and orbital speeds."""

    @pytest.fixture
    def zone(self):
        return HabitableZone(0.953, 1.374)

    def test_rotation_clamped(self, zone):
        """Test speeds stay within the clamp, with both spin directions."""
        prng = SplitMix32(11)
        speeds = [rotation_speed(r, zone, 50.0, prng) for r in (0.2, 1.0, 5.0, 30.0, 50.0) * 40]
        assert all(MIN_ROTATION_SPEED <= abs(s) <= MAX_ROTATION_SPEED for s in speeds)
        assert any(s < 0 for s in speeds)
        assert any(s > 0 for s in speeds)

    def test_rotation_reproducible(self, zone):
        """Test the same stream reproduces rotation speeds."""
        a = rotation_speed(1.0, zone, 40.0, SplitMix32(5))
        b = rotation_speed(1.0, zone, 40.0, SplitMix32(5))
        assert a == b

    def test_degenerate_zone(self):
        """Test a zero-width zone at the origin is tolerated."""
        speed = rotation_speed(1.0, HabitableZone(0.0, 0.0), 10.0, SplitMix32(2))
        assert MIN_ROTATION_SPEED <= abs(speed) <= MAX_ROTATION_SPEED

    def test_orbital_speed_falls_with_distance(self):
        """Test farther planets move slower."""
        assert orbital_speed(1.0) > orbital_speed(2.0) > orbital_speed(30.0)

    def test_year_length_scaling(self):
        """Test year length grows with the square of the orbit radius."""
        one = orbital_speed_to_earth_days(orbital_speed(1.0), 1.0)
        two = orbital_speed_to_earth_days(orbital_speed(2.0), 2.0)
        assert two / one == pytest.approx(4.0)

    def test_day_length(self):
        """Test day length ignores spin direction."""
        hours = rotation_speed_to_earth_hours(0.0001)
        assert hours == pytest.approx(2 * math.pi / 0.0001 * 0.001)
        assert rotation_speed_to_earth_hours(-0.0001) == hours

    def test_local_days(self):
        """Test local days per year is year length over day length."""
        rotation, orbital = 0.0002, orbital_speed(1.5)
        expected = orbital_speed_to_earth_days(orbital, 1.5) / (
            rotation_speed_to_earth_hours(rotation) / 24
        )
        assert local_days_per_orbit(rotation, orbital, 1.5) == pytest.approx(expected)

    def test_tidal_lock_rate(self):
        """Test roughly one planet in ten is tidally locked."""
        prng = SplitMix32(3)
        locked = sum(is_tidally_locked(prng) for _ in range(2000))
        assert 100 < locked < 300


class TestNames:
    """Test system designations."""

    def test_format(self):
        """Test the catalogue pattern."""
        name = generate_system_name(SplitMix32(8))
        assert re.fullmatch(r"P[0-9A-Z]{3}-[0-9A-Z]{3}", name)

    def test_reproducible(self):
        """Test names follow the stream."""
        assert generate_system_name(SplitMix32(8)) == generate_system_name(SplitMix32(8))

    def test_shared_cosmetic_stream(self):
        """Test the shared cosmetic stream is used by default."""
        set_cosmetic_seed(21)
        first = generate_system_name()
        set_cosmetic_seed(21)
        assert generate_system_name() == first

    def test_planet_name(self):
        """Test planet designations."""
        assert planet_name("PABC-123", 3) == "PABC-123/3"
