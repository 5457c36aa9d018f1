from dataclasses import dataclass

from starforge.stellar_neighborhood import StellarNeighborhood


@dataclass(frozen=True)
class Galaxy:
    """The galaxy, as far as it has been charted around the origin."""

    stellar_neighborhood: StellarNeighborhood
