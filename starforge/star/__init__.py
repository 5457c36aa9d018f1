"""Main-sequence stars."""

from .constraints import StarConstraints
from .spectral_class import SpectralClass
from .star import Star

__all__ = [
    "Star",
    "StarConstraints",
    "SpectralClass",
]
