import numpy as np
import pydantic
import pytest

from starforge import (
    Double,
    NotHabitableError,
    Single,
    Star,
    StarConstraints,
    StarSubsystemConstraints,
    StarSystem,
    StarSystemConstraints,
)
from starforge.star.math import frost_line_from_luminosity, habitable_zone_from_luminosity


def _check_ordering(subsystem):
    if isinstance(subsystem, Double):
        assert subsystem.primary.mass >= subsystem.secondary.mass
        _check_ordering(subsystem.primary)
        _check_ordering(subsystem.secondary)


class TestSingle:
    """Tests for single-star subsystem nodes."""

    def test_delegates_to_star(self, sun_like_star):
        single = Single(sun_like_star)

        assert single.mass == sun_like_star.mass
        assert single.count == 1
        assert single.depth == 0
        assert single.stars == [sun_like_star]
        assert single.habitable_zone == sun_like_star.habitable_zone
        assert single.frost_line == sun_like_star.frost_line
        assert single.satellite_zone == sun_like_star.satellite_zone

    def test_strict_habitability(self, habitable_star, red_dwarf):
        assert Single(habitable_star).is_habitable
        with pytest.raises(NotHabitableError):
            Single(red_dwarf).check_habitable()


class TestDouble:
    """Tests for double subsystem nodes."""

    def test_rejects_lighter_primary(self, sun_like_star, red_dwarf):
        with pytest.raises(ValueError):
            Double(primary=Single(red_dwarf), secondary=Single(sun_like_star))

    def test_from_pair_orders_by_mass(self, sun_like_star, red_dwarf):
        double = Double.from_pair(Single(red_dwarf), Single(sun_like_star))

        assert double.primary.star is sun_like_star
        assert double.secondary.star is red_dwarf
        assert double.stars == [sun_like_star, red_dwarf]

    def test_equal_masses_accepted(self, sun_like_star):
        double = Double(primary=Single(sun_like_star), secondary=Single(sun_like_star))
        assert double.mass == pytest.approx(2.0)

    def test_aggregation(self, sun_like_star, red_dwarf):
        inner = Double.from_pair(Single(sun_like_star), Single(red_dwarf))
        outer = Double.from_pair(inner, Single(red_dwarf))

        assert outer.count == 3
        assert outer.depth == 2
        assert outer.mass == pytest.approx(1.6)
        assert outer.luminosity == pytest.approx(sun_like_star.luminosity + 2 * red_dwarf.luminosity)
        assert outer.habitable_zone == habitable_zone_from_luminosity(outer.luminosity)
        assert outer.frost_line == frost_line_from_luminosity(outer.luminosity)
        assert outer.satellite_zone == pytest.approx((0.16, 64.0))

    def test_habitable_if_either_half_is(self, habitable_star, red_dwarf):
        double = Double.from_pair(Single(habitable_star), Single(red_dwarf))
        assert double.is_habitable
        double.check_habitable()

        nested = Double.from_pair(Single(red_dwarf), double)
        assert nested.is_habitable

    def test_not_habitable_if_neither_half_is(self, red_dwarf):
        double = Double.from_pair(Single(red_dwarf), Single(red_dwarf))
        assert not double.is_habitable
        with pytest.raises(NotHabitableError):
            double.check_habitable()


class TestStarSubsystemConstraints:
    """Tests for subsystem tree generation."""

    def test_midpoint_is_single(self, midpoint_stream):
        subsystem = StarSubsystemConstraints.default().generate(midpoint_stream)
        assert isinstance(subsystem, Single)

    def test_never_binary(self, rng):
        for _ in range(20):
            assert isinstance(StarSubsystemConstraints(binary_probability=0.0).generate(rng), Single)

    def test_maximum_depth_caps_tree(self, rng):
        constraints = StarSubsystemConstraints(binary_probability=1.0, maximum_depth=3)
        subsystem = constraints.generate(rng)

        assert subsystem.depth == 3
        assert subsystem.count == 8
        assert subsystem.mass == pytest.approx(sum(star.mass for star in subsystem.stars))

    def test_maximum_depth_zero(self, midpoint_stream):
        constraints = StarSubsystemConstraints(binary_probability=1.0, maximum_depth=0)
        assert isinstance(constraints.generate(midpoint_stream), Single)
        # The cap short-circuits the binary draw
        assert midpoint_stream.calls["random"] == 1

    def test_ordering_and_aggregation(self):
        constraints = StarSubsystemConstraints(binary_probability=0.4)
        for seed in range(30):
            subsystem = constraints.generate(np.random.default_rng(seed))
            _check_ordering(subsystem)
            assert subsystem.count == len(subsystem.stars)
            assert subsystem.mass == pytest.approx(sum(star.mass for star in subsystem.stars))

    @pytest.mark.parametrize("binary_probability", [0.5, 0.75, 1.0])
    def test_uncapped_tree_must_terminate(self, binary_probability):
        """A split probability of one half or more is only accepted together with a depth cap."""
        with pytest.raises(pydantic.ValidationError, match="maximum_depth"):
            StarSubsystemConstraints(binary_probability=binary_probability)

        capped = StarSubsystemConstraints(binary_probability=binary_probability, maximum_depth=4)
        assert capped.maximum_depth == 4

    def test_certain_split_with_cap_builds_star_system(self, rng):
        """An always-splitting tree is usable once a depth cap bounds it."""
        subsystem_constraints = StarSubsystemConstraints(binary_probability=1.0, maximum_depth=2)
        star_system = StarSystem.from_constraints(
            StarSystemConstraints(subsystem_constraints=subsystem_constraints), rng
        )
        assert star_system.stellar_count == 4

    def test_leaves_are_single_stars(self):
        constraints = StarSubsystemConstraints(binary_probability=0.4)
        for seed in range(10):
            subsystem = constraints.generate(np.random.default_rng(seed))
            assert all(type(star) is Star for star in subsystem.stars)

    def test_same_seed_same_tree(self):
        constraints = StarSubsystemConstraints(binary_probability=0.4)
        assert constraints.generate(np.random.default_rng(3)) == constraints.generate(np.random.default_rng(3))

    def test_star_constraints_apply_to_every_leaf(self, rng):
        constraints = StarSubsystemConstraints(
            binary_probability=1.0, maximum_depth=2, star_constraints=StarConstraints.habitable()
        )
        subsystem = constraints.generate(rng)
        assert all(star.is_habitable for star in subsystem.stars)
