"""Star systems: one or more stars arranged as a recursive subsystem tree."""

from .constraints import StarSubsystemConstraints, StarSystemConstraints
from .star_system import StarSystem
from .subsystem import Double, Single, Subsystem

__all__ = [
    "Double",
    "Single",
    "StarSubsystemConstraints",
    "StarSystem",
    "StarSystemConstraints",
    "Subsystem",
]
