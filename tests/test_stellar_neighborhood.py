import astropy.units as u
import numpy as np
import pytest

from starforge import (
    Galaxy,
    GalaxyConstraints,
    StarSystemConstraints,
    StellarNeighborConstraints,
    StellarNeighborhoodConstraints,
)


class TestStellarNeighbor:
    """Tests for neighbor placement."""

    def test_inside_radius(self, rng):
        constraints = StellarNeighborConstraints(radius=5.0)
        for _ in range(10):
            neighbor = constraints.generate(rng)
            assert neighbor.distance <= 5.0
            assert neighbor.distance == pytest.approx(np.linalg.norm(neighbor.coordinates))

    def test_midpoint_generation(self, midpoint_stream):
        neighbor = StellarNeighborConstraints.default().generate(midpoint_stream)

        x, y, z = neighbor.coordinates
        assert x == pytest.approx(y)
        assert neighbor.distance == pytest.approx(10.0 * 0.5 ** (1.0 / 3.0))
        assert neighbor.star_system.stellar_count == 1

    def test_habitable(self, rng):
        neighbor = StellarNeighborConstraints.habitable().generate(rng)
        assert neighbor.star_system.is_habitable


class TestStellarNeighborhood:
    """Tests for neighborhood generation and table export."""

    def test_neighbor_count(self):
        assert StellarNeighborhoodConstraints(radius=5.0, density=0.01).get_neighbor_count() == 5
        # Default: 0.004 systems per cubic light year within 10 light years
        assert StellarNeighborhoodConstraints.default().get_neighbor_count() == 17

    def test_generate(self, rng):
        neighborhood = StellarNeighborhoodConstraints(radius=5.0, density=0.01).generate(rng)

        assert neighborhood.radius == 5.0
        assert len(neighborhood) == 5
        assert all(neighbor.distance <= 5.0 for neighbor in neighborhood.neighbors)

    def test_star_system_constraints_forwarded(self, rng):
        constraints = StellarNeighborhoodConstraints(
            radius=5.0, density=0.01, star_system_constraints=StarSystemConstraints.habitable()
        )
        neighborhood = constraints.generate(rng)

        assert len(neighborhood.habitable_neighbors) == len(neighborhood)

    def test_to_qtable(self, rng):
        neighborhood = StellarNeighborhoodConstraints(radius=5.0, density=0.01).generate(rng)
        table = neighborhood.to_qtable()

        assert len(table) == 5
        assert table["distance"].unit == u.lyr
        assert table["x"].unit == u.lyr
        assert table["stellar_mass"].unit == u.solMass
        assert table["luminosity"].unit == u.solLum
        assert np.all(np.diff(table["distance"].value) >= 0)
        assert set(table["name"]) == {n.star_system.name for n in neighborhood.neighbors}
        assert table["stellar_count"].sum() == sum(n.star_system.stellar_count for n in neighborhood.neighbors)

    def test_empty_neighborhood(self, rng):
        neighborhood = StellarNeighborhoodConstraints(density=0.0).generate(rng)

        assert len(neighborhood) == 0
        assert len(neighborhood.to_qtable()) == 0


class TestGalaxy:
    """Tests for galaxy generation."""

    def test_generate(self, rng):
        constraints = GalaxyConstraints(stellar_neighborhood_constraints=StellarNeighborhoodConstraints(radius=3.0))
        galaxy = constraints.generate(rng)

        assert isinstance(galaxy, Galaxy)
        assert galaxy.stellar_neighborhood.radius == 3.0
        # round(0.004 * 4/3 * pi * 27) == 0
        assert len(galaxy.stellar_neighborhood) == 0

    def test_habitable(self, rng):
        constraints = GalaxyConstraints.habitable()
        assert constraints.stellar_neighborhood_constraints == StellarNeighborhoodConstraints.habitable()

        small = constraints.model_copy(
            update={
                "stellar_neighborhood_constraints": StellarNeighborhoodConstraints.habitable().model_copy(
                    update={"radius": 4.0, "density": 0.01}
                )
            }
        )
        galaxy = small.generate(rng)
        assert len(galaxy.stellar_neighborhood) == 3
        assert all(n.star_system.is_habitable for n in galaxy.stellar_neighborhood.neighbors)
