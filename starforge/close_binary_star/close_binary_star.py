from dataclasses import dataclass

from starforge.close_binary_star.constants import FORBIDDEN_ZONE_FACTOR
from starforge.errors import NotHabitableError
from starforge.star.math import frost_line_from_luminosity, habitable_zone_from_luminosity, satellite_zone_from_mass
from starforge.star.star import Star


def minimum_habitable_combined_mass(average_separation: float, orbital_eccentricity: float) -> float:
    """
    Smallest combined mass (Msol) whose habitable zone clears the circumbinary forbidden zone.

    Uses the main-sequence approximation L ~ M^4 together with the inner edge of the
    habitable zone, sqrt(L / 1.1), which must lie beyond 4 * a * (1 + e).
    """
    forbidden_zone_edge = FORBIDDEN_ZONE_FACTOR * average_separation * (1.0 + orbital_eccentricity)
    return (1.1 * forbidden_zone_edge**2.0) ** 0.25


@dataclass(frozen=True)
class CloseBinaryStar:
    """
    Two stars orbiting closely enough to act as a single host for circumbinary planets.

    The combined zones are derived from the combined luminosity and mass, using the
    same formulas as for a single star.
    """

    primary: Star
    secondary: Star
    # AU
    average_separation: float
    orbital_eccentricity: float

    def __post_init__(self):
        if not 0.0 <= self.orbital_eccentricity < 1.0:
            raise ValueError(f"Orbital eccentricity must be in [0, 1), got {self.orbital_eccentricity}")
        if self.average_separation <= 0.0:
            raise ValueError(f"Average separation must be positive, got {self.average_separation}")
        if self.primary.mass < self.secondary.mass:
            raise ValueError("The primary star must be at least as massive as the secondary star")

    @property
    def name(self) -> str:
        return self.primary.name

    @property
    def mass(self) -> float:
        return self.primary.mass + self.secondary.mass

    @property
    def luminosity(self) -> float:
        return self.primary.luminosity + self.secondary.luminosity

    @property
    def habitable_zone(self) -> tuple[float, float]:
        return habitable_zone_from_luminosity(self.luminosity)

    @property
    def frost_line(self) -> float:
        return frost_line_from_luminosity(self.luminosity)

    @property
    def satellite_zone(self) -> tuple[float, float]:
        return satellite_zone_from_mass(self.mass)

    @property
    def minimum_separation(self) -> float:
        return self.average_separation * (1.0 - self.orbital_eccentricity)

    @property
    def maximum_separation(self) -> float:
        return self.average_separation * (1.0 + self.orbital_eccentricity)

    @property
    def forbidden_zone(self) -> tuple[float, float]:
        """Region (AU) in which neither circumbinary nor circumstellar orbits are stable."""
        return self.minimum_separation / 3.0, FORBIDDEN_ZONE_FACTOR * self.maximum_separation

    def check_habitable(self):
        self.primary.check_habitable()
        self.secondary.check_habitable()
        minimum_mass = minimum_habitable_combined_mass(self.average_separation, self.orbital_eccentricity)
        if self.mass < minimum_mass:
            raise NotHabitableError(
                f"Binary {self.name}: combined mass {self.mass:.3f} Msol is below {minimum_mass:.3f} Msol, "
                "the habitable zone falls inside the forbidden zone"
            )

    @property
    def is_habitable(self) -> bool:
        try:
            self.check_habitable()
        except NotHabitableError:
            return False
        return True
