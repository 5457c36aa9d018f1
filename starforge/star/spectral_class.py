from enum import Enum
from typing import Optional

from starforge.errors import ConstraintUnsatisfiableError
from starforge.random_stream import RandomStream, weighted_choice


class SpectralClass(Enum):
    """
    Morgan-Keenan type of a main-sequence star.

    Each member carries its mass range (Msol), effective temperature range (K)
    and the relative frequency used when drawing a random star. O-type stars
    are rare enough to be left out of random draws entirely.
    """

    O = ("O", (16.0, 150.0), (33_000.0, 95_000.0), 0)
    B = ("B", (2.1, 16.0), (10_000.0, 33_000.0), 1)
    A = ("A", (1.4, 2.1), (7_500.0, 10_000.0), 6)
    F = ("F", (1.04, 1.4), (6_000.0, 7_500.0), 30)
    G = ("G", (0.8, 1.04), (5_200.0, 6_000.0), 76)
    K = ("K", (0.45, 0.8), (3_700.0, 5_200.0), 121)
    M = ("M", (0.08, 0.45), (2_000.0, 3_700.0), 725)

    def __init__(
        self,
        letter: str,
        mass_range: tuple[float, float],
        temperature_range: tuple[float, float],
        weight: int,
    ):
        self.letter = letter
        self.mass_range = mass_range
        self.temperature_range = temperature_range
        self.weight = weight

    @classmethod
    def from_temperature(cls, temperature: float) -> "SpectralClass":
        for spectral_class in reversed(list(cls)):
            if temperature < spectral_class.temperature_range[1]:
                return spectral_class
        return cls.O

    def subclass(self, temperature: float) -> int:
        """Decile within the class, 0 being the hottest."""
        lower, upper = self.temperature_range
        decile = int(10 * (upper - temperature) / (upper - lower))
        return min(max(decile, 0), 9)

    def narrowed_mass_range(self, minimum: float, maximum: float) -> Optional[tuple[float, float]]:
        lower = max(self.mass_range[0], minimum)
        upper = min(self.mass_range[1], maximum)
        if lower > upper:
            return None
        return lower, upper


HABITABLE_SPECTRAL_CLASSES = (SpectralClass.F, SpectralClass.G, SpectralClass.K)


def get_random_spectral_class(
    rng: RandomStream,
    minimum_mass: float,
    maximum_mass: float,
    habitable: bool = False,
) -> SpectralClass:
    """
    Weighted draw over the classes whose mass range intersects the given window.

    Args:
        rng: Random stream to draw from.
        minimum_mass: Lower end of the allowed mass window, in Msol.
        maximum_mass: Upper end of the allowed mass window, in Msol.
        habitable: Restrict the draw to F, G and K stars.

    Raises:
        ConstraintUnsatisfiableError: if no class can produce a mass in the window.
    """
    candidates = HABITABLE_SPECTRAL_CLASSES if habitable else tuple(SpectralClass)
    candidates = [
        c for c in candidates if c.weight > 0 and c.narrowed_mass_range(minimum_mass, maximum_mass) is not None
    ]
    if not candidates:
        raise ConstraintUnsatisfiableError("spectral class mass range", minimum_mass, maximum_mass)

    return weighted_choice(rng, candidates, [c.weight for c in candidates])
