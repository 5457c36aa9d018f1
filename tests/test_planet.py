import numpy as np
import pytest

from starforge import (
    CloseBinaryStarConstraints,
    GasGiantPlanet,
    GasGiantPlanetConstraints,
    NotHabitableError,
    OutOfRangeError,
    PlanetConstraints,
    TerrestrialPlanet,
    TerrestrialPlanetConstraints,
)
from starforge.planet import get_orbital_elements


class TestOrbitalElements:
    """Tests for the get_orbital_elements function."""

    def test_earth(self):
        assert get_orbital_elements(1.0, 0.0, 1.0) == pytest.approx((1.0, 1.0, 1.0))

    def test_eccentric_orbit(self):
        perihelion, aphelion, period = get_orbital_elements(5.2, 0.05, 1.0)
        assert perihelion == pytest.approx(4.94)
        assert aphelion == pytest.approx(5.46)
        assert period == pytest.approx(11.858, abs=1e-3)

    def test_heavier_host_shortens_period(self):
        assert get_orbital_elements(1.0, 0.0, 4.0)[2] == pytest.approx(0.5)


class TestTerrestrialPlanet:
    """Tests for terrestrial planet generation."""

    def test_midpoint_generation(self, sun_like_star, midpoint_stream):
        planet = TerrestrialPlanetConstraints.default().generate(sun_like_star, 1.0, midpoint_stream)

        assert planet.mass == pytest.approx(5.05)
        assert planet.orbital_eccentricity == pytest.approx(0.125)
        assert planet.semi_major_axis == 1.0
        assert planet.perihelion == pytest.approx(0.875)
        assert planet.aphelion == pytest.approx(1.125)
        assert planet.orbital_period == pytest.approx(1.0)
        assert not planet.is_habitable

    def test_earth_analogue(self, sun_like_star, midpoint_stream):
        constraints = TerrestrialPlanetConstraints(minimum_mass=1.0, maximum_mass=1.0)
        planet = constraints.generate(sun_like_star, 1.0, midpoint_stream)

        assert planet.radius == pytest.approx(1.0)
        assert planet.density == pytest.approx(1.0)
        assert planet.surface_gravity == pytest.approx(1.0)
        assert planet.escape_velocity == pytest.approx(11.186)

    def test_habitable(self, sun_like_star, midpoint_stream):
        planet = TerrestrialPlanetConstraints.habitable().generate(sun_like_star, 1.0, midpoint_stream)

        assert planet.mass == pytest.approx(1.9)
        assert planet.orbital_eccentricity == pytest.approx(0.05)
        assert planet.is_habitable

    def test_habitable_always_habitable(self, sun_like_star, rng):
        for _ in range(50):
            assert TerrestrialPlanetConstraints.habitable().generate(sun_like_star, 1.0, rng).is_habitable

    def test_within_bounds(self, sun_like_star, rng):
        constraints = TerrestrialPlanetConstraints(
            minimum_mass=0.5, maximum_mass=2.0, maximum_orbital_eccentricity=0.2
        )
        for _ in range(50):
            planet = constraints.generate(sun_like_star, 0.7, rng)
            assert 0.5 <= planet.mass < 2.0
            assert 0.0 <= planet.orbital_eccentricity < 0.2

    def test_eccentric_orbit_not_habitable(self, sun_like_star, midpoint_stream):
        constraints = TerrestrialPlanetConstraints(
            minimum_mass=1.0, maximum_mass=1.0, minimum_orbital_eccentricity=0.2, maximum_orbital_eccentricity=0.2
        )
        planet = constraints.generate(sun_like_star, 1.0, midpoint_stream)
        with pytest.raises(NotHabitableError, match="eccentricity"):
            planet.check_habitable()

    @pytest.mark.parametrize("distance", [0.0, -1.0])
    def test_invalid_distance(self, sun_like_star, midpoint_stream, distance):
        with pytest.raises(OutOfRangeError):
            TerrestrialPlanetConstraints.default().generate(sun_like_star, distance, midpoint_stream)


class TestGasGiantPlanet:
    """Tests for gas giant generation."""

    def test_midpoint_generation(self, sun_like_star, midpoint_stream):
        planet = GasGiantPlanetConstraints.default().generate(sun_like_star, 5.2, midpoint_stream)

        assert planet.mass == pytest.approx(np.exp(0.2))
        assert planet.orbital_eccentricity == pytest.approx(0.0167)
        assert planet.orbital_period == pytest.approx(5.2**1.5)
        assert not planet.is_habitable
        with pytest.raises(NotHabitableError):
            planet.check_habitable()

    def test_eccentricity_override(self, sun_like_star, midpoint_stream):
        planet = GasGiantPlanetConstraints(orbital_eccentricity=0.3).generate(sun_like_star, 5.2, midpoint_stream)
        assert planet.aphelion == pytest.approx(5.2 * 1.3)

    def test_mass_outside_bounds(self, sun_like_star, midpoint_stream):
        with pytest.raises(OutOfRangeError):
            GasGiantPlanetConstraints(maximum_mass=1.0).generate(sun_like_star, 5.2, midpoint_stream)

    def test_invalid_distance(self, sun_like_star, midpoint_stream):
        with pytest.raises(OutOfRangeError):
            GasGiantPlanetConstraints.default().generate(sun_like_star, 0.0, midpoint_stream)


class TestPlanetConstraints:
    """Tests for the frost line dispatch."""

    def test_frost_line_selects_kind(self, sun_like_star, midpoint_stream):
        constraints = PlanetConstraints.default()

        assert isinstance(constraints.generate(sun_like_star, 1.0, midpoint_stream), TerrestrialPlanet)
        frost_line = sun_like_star.frost_line
        assert isinstance(constraints.generate(sun_like_star, frost_line, midpoint_stream), GasGiantPlanet)
        assert isinstance(constraints.generate(sun_like_star, 10.0, midpoint_stream), GasGiantPlanet)

    def test_close_binary_host(self, midpoint_stream):
        host_star = CloseBinaryStarConstraints.default().generate(midpoint_stream)
        # Well beyond the frost line of a single solar mass star, but inside the pair's
        assert host_star.frost_line > 6.0
        planet = PlanetConstraints.default().generate(host_star, 6.0, midpoint_stream)

        assert isinstance(planet, TerrestrialPlanet)
        assert planet.orbital_period == pytest.approx((6.0**3 / host_star.mass) ** 0.5)

    def test_habitable(self, sun_like_star, midpoint_stream):
        planet = PlanetConstraints.habitable().generate(sun_like_star, 1.0, midpoint_stream)
        assert planet.is_habitable
