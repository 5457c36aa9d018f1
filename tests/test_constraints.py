import pydantic
import pytest

from starforge import (
    CloseBinaryStarConstraints,
    HostStarConstraints,
    MoonConstraints,
    StarConstraints,
    StarSubsystemConstraints,
    StarSystemConstraints,
    resolve,
)


class TestResolve:
    """Tests for the resolve function."""

    def test_uses_default_when_unset(self):
        assert resolve(None, 3.0) == 3.0

    def test_keeps_falsy_override(self):
        assert resolve(0.0, 3.0) == 0.0
        assert resolve(False, True) is False


class TestConstraintRecords:
    """Tests for validation shared by all constraint records."""

    def test_default_leaves_everything_unset(self):
        constraints = StarConstraints.default()
        assert constraints == StarConstraints()
        assert constraints.minimum_mass is None
        assert not constraints.enforce_habitability

    def test_habitable_sets_flag(self):
        assert StarConstraints.habitable().enforce_habitability
        assert CloseBinaryStarConstraints.habitable().enforce_habitability
        assert StarSystemConstraints.habitable().enforce_habitability

    def test_habitable_presets_propagate_down(self):
        constraints = StarSystemConstraints.habitable()
        assert constraints.subsystem_constraints == StarSubsystemConstraints.habitable()
        assert constraints.subsystem_constraints.star_constraints == StarConstraints.habitable()

        host = HostStarConstraints.habitable()
        assert host.star_constraints == StarConstraints.habitable()
        assert host.close_binary_star_constraints == CloseBinaryStarConstraints.habitable()

    def test_minimum_above_maximum_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            StarConstraints(minimum_mass=2.0, maximum_mass=1.0)
        with pytest.raises(pydantic.ValidationError):
            MoonConstraints(minimum_albedo=0.6, maximum_albedo=0.2)

    def test_single_bound_accepted(self):
        # Only one end of the pair is set, so there is nothing to compare against
        assert StarConstraints(minimum_mass=200.0).minimum_mass == 200.0

    def test_invalid_values_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            StarSystemConstraints(retries=-1)
        with pytest.raises(pydantic.ValidationError):
            HostStarConstraints(binary_probability=1.5)
        with pytest.raises(pydantic.ValidationError):
            CloseBinaryStarConstraints(maximum_orbital_eccentricity=1.0)
        with pytest.raises(pydantic.ValidationError):
            StarSubsystemConstraints(maximum_depth=-1)

    def test_unknown_field_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            StarConstraints(minimum_mas=1.0)

    def test_records_are_immutable(self):
        constraints = StarConstraints()
        with pytest.raises(pydantic.ValidationError):
            constraints.minimum_mass = 1.0

    def test_derived_record(self):
        constraints = StarSystemConstraints.habitable()
        derived = constraints.model_copy(update={"retries": 0})

        assert derived.retries == 0
        assert constraints.retries is None
        assert derived.subsystem_constraints == constraints.subsystem_constraints
