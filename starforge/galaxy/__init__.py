"""Galaxies."""

from .constraints import GalaxyConstraints
from .galaxy import Galaxy

__all__ = [
    "Galaxy",
    "GalaxyConstraints",
]
