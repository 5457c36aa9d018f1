import math
from dataclasses import dataclass

from starforge.star_system import StarSystem


@dataclass(frozen=True)
class StellarNeighbor:
    """A star system placed relative to the origin of its neighborhood."""

    # Light years from the origin along each axis
    coordinates: tuple[float, float, float]
    star_system: StarSystem

    @property
    def distance(self) -> float:
        """Light years from the origin."""
        return math.sqrt(sum(c**2 for c in self.coordinates))
