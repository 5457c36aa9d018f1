"""Star systems surrounding the origin within a bounding sphere."""

from .constraints import StellarNeighborConstraints, StellarNeighborhoodConstraints
from .stellar_neighbor import StellarNeighbor
from .stellar_neighborhood import StellarNeighborhood

__all__ = [
    "StellarNeighbor",
    "StellarNeighborConstraints",
    "StellarNeighborhood",
    "StellarNeighborhoodConstraints",
]
