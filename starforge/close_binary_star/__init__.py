"""Close binary stars."""

from .close_binary_star import CloseBinaryStar, minimum_habitable_combined_mass
from .constraints import CloseBinaryStarConstraints

__all__ = [
    "CloseBinaryStar",
    "CloseBinaryStarConstraints",
    "minimum_habitable_combined_mass",
]
