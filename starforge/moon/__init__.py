"""Natural satellites."""

from .constraints import MoonConstraints
from .moon import Moon

__all__ = [
    "Moon",
    "MoonConstraints",
]
