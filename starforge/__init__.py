"""Starforge - Procedural generation of stars, star systems and their neighborhoods."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("starforge")
except importlib.metadata.PackageNotFoundError:
    # Package is not installed, try to read from pyproject.toml
    import os
    from pathlib import Path

    import tomli

    pyproject_path = Path(os.path.realpath(__file__)).parent.parent / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            __version__ = tomli.load(f)["project"]["version"]
    except (FileNotFoundError, KeyError, ImportError):
        __version__ = "0.0.0"


from .close_binary_star import CloseBinaryStar, CloseBinaryStarConstraints
from .constraints import resolve
from .errors import (
    ConstraintUnsatisfiableError,
    NotHabitableError,
    OutOfRangeError,
    RetryExhaustedError,
    StarforgeError,
)
from .galaxy import Galaxy, GalaxyConstraints
from .host_star import HostStar, HostStarConstraints
from .moon import Moon, MoonConstraints
from .planet import (
    GasGiantPlanet,
    GasGiantPlanetConstraints,
    Planet,
    PlanetConstraints,
    TerrestrialPlanet,
    TerrestrialPlanetConstraints,
)
from .random_stream import RandomStream
from .star import SpectralClass, Star, StarConstraints
from .star_system import Double, Single, StarSubsystemConstraints, StarSystem, StarSystemConstraints, Subsystem
from .stellar_neighborhood import (
    StellarNeighbor,
    StellarNeighborConstraints,
    StellarNeighborhood,
    StellarNeighborhoodConstraints,
)

__all__ = [
    # Stars
    "Star",
    "StarConstraints",
    "SpectralClass",
    "CloseBinaryStar",
    "CloseBinaryStarConstraints",
    "HostStar",
    "HostStarConstraints",
    # Star systems
    "Single",
    "Double",
    "Subsystem",
    "StarSubsystemConstraints",
    "StarSystem",
    "StarSystemConstraints",
    # Planets and moons
    "Planet",
    "PlanetConstraints",
    "TerrestrialPlanet",
    "TerrestrialPlanetConstraints",
    "GasGiantPlanet",
    "GasGiantPlanetConstraints",
    "Moon",
    "MoonConstraints",
    # Neighborhood and galaxy
    "StellarNeighbor",
    "StellarNeighborConstraints",
    "StellarNeighborhood",
    "StellarNeighborhoodConstraints",
    "Galaxy",
    "GalaxyConstraints",
    # Utilities
    "RandomStream",
    "resolve",
    # Errors
    "StarforgeError",
    "OutOfRangeError",
    "ConstraintUnsatisfiableError",
    "RetryExhaustedError",
    "NotHabitableError",
]
