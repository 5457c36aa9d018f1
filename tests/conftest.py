import numpy as np
import pytest

from starforge import Star

from .utils.fixed_stream import FixedRandomStream

TEST_SEED = 20240611


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(TEST_SEED)


@pytest.fixture
def midpoint_stream() -> FixedRandomStream:
    return FixedRandomStream()


@pytest.fixture
def sun_like_star() -> Star:
    """One solar mass star halfway through its allowed age range."""
    return Star.from_mass(1.0, FixedRandomStream())


@pytest.fixture
def habitable_star() -> Star:
    return Star.from_mass(1.0, FixedRandomStream(), minimum_age=5.0)


@pytest.fixture
def red_dwarf() -> Star:
    return Star.from_mass(0.3, FixedRandomStream())
