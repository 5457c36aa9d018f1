import logging
from dataclasses import dataclass
from typing import Optional

from starforge.constraints import resolve
from starforge.errors import NotHabitableError, OutOfRangeError
from starforge.names import generate_star_name
from starforge.random_stream import RandomStream, sample_uniform
from starforge.star.constants import (
    MAXIMUM_AGE_FRACTION,
    MAXIMUM_HABITABLE_MASS,
    MINIMUM_AGE_FRACTION,
    MINIMUM_HABITABLE_AGE,
    MINIMUM_HABITABLE_MASS,
)
from starforge.star.math import (
    frost_line_from_luminosity,
    get_approximate_innermost_orbit,
    get_approximate_outermost_orbit,
    habitable_zone_from_luminosity,
    star_mass_to_luminosity,
    star_mass_to_radius,
    star_mass_to_rgb,
    star_mass_to_spectral_class,
    star_mass_to_temperature,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Star:
    """
    A main-sequence star.

    Attributes:
        mass: Msol.
        temperature: Effective temperature in Kelvin.
        radius: Rsol.
        luminosity: Lsol.
        density: Dsol.
        life_expectancy: Main-sequence lifetime in Gyr.
        current_age: Gyr, strictly between 0 and the life expectancy.
        habitable_zone: Inner and outer edge in AU.
        satellite_zone: Innermost and outermost sustainable orbit in AU.
        frost_line: AU.
        absolute_rgb: sRGB color of the photosphere.
        spectral_class: Type, decile and luminosity class, e.g. ``G2V``.
        name: Generated display name.
    """

    mass: float
    temperature: float
    radius: float
    luminosity: float
    density: float
    life_expectancy: float
    current_age: float
    habitable_zone: tuple[float, float]
    satellite_zone: tuple[float, float]
    frost_line: float
    absolute_rgb: tuple[int, int, int]
    spectral_class: str
    name: str

    @classmethod
    def from_mass(
        cls,
        mass: float,
        rng: RandomStream,
        minimum_age: Optional[float] = None,
        maximum_age: Optional[float] = None,
    ) -> "Star":
        """
        Build a star from its mass, drawing only its current age and its name.

        Args:
            mass: Stellar mass in Msol.
            rng: Random stream to draw from.
            minimum_age: Lower age bound in Gyr, defaults to 10% of the life expectancy.
            maximum_age: Upper age bound in Gyr, never beyond 90% of the life expectancy.

        Raises:
            OutOfRangeError: if the mass lies outside the main sequence, or the minimum age is not positive.
            ConstraintUnsatisfiableError: if the resolved age window is empty.
        """
        temperature = star_mass_to_temperature(mass)
        luminosity = star_mass_to_luminosity(mass)
        radius = star_mass_to_radius(mass)
        spectral_class = star_mass_to_spectral_class(mass)
        absolute_rgb = star_mass_to_rgb(mass)
        satellite_zone = (get_approximate_innermost_orbit(mass), get_approximate_outermost_orbit(mass))

        life_expectancy = mass / luminosity * 10.0
        oldest_age = MAXIMUM_AGE_FRACTION * life_expectancy
        lower_bound_age = resolve(minimum_age, MINIMUM_AGE_FRACTION * life_expectancy)
        if lower_bound_age <= 0.0:
            raise OutOfRangeError(f"Minimum stellar age must be positive, got {lower_bound_age} Gyr")
        upper_bound_age = min(resolve(maximum_age, oldest_age), oldest_age)
        current_age = sample_uniform(rng, lower_bound_age, upper_bound_age, "stellar age")
        name = generate_star_name(rng)

        star = cls(
            mass=mass,
            temperature=temperature,
            radius=radius,
            luminosity=luminosity,
            density=mass / radius**3,
            life_expectancy=life_expectancy,
            current_age=current_age,
            habitable_zone=habitable_zone_from_luminosity(luminosity),
            satellite_zone=satellite_zone,
            frost_line=frost_line_from_luminosity(luminosity),
            absolute_rgb=absolute_rgb,
            spectral_class=spectral_class,
            name=name,
        )
        logger.debug(f"Generated star {star.name} ({star.spectral_class}, {mass:.3f} Msol, {current_age:.2f} Gyr)")
        return star

    def check_habitable(self):
        """
        Raises:
            NotHabitableError: if the star is too light, too heavy or too young to support conventional life.
        """
        if self.mass < MINIMUM_HABITABLE_MASS:
            raise NotHabitableError(f"Star {self.name}: mass {self.mass:.3f} Msol is too low to support life")
        if self.mass > MAXIMUM_HABITABLE_MASS:
            raise NotHabitableError(f"Star {self.name}: mass {self.mass:.3f} Msol is too high to support life")
        if self.current_age < MINIMUM_HABITABLE_AGE:
            raise NotHabitableError(f"Star {self.name}: age {self.current_age:.2f} Gyr is too young to support life")

    @property
    def is_habitable(self) -> bool:
        try:
            self.check_habitable()
        except NotHabitableError:
            return False
        return True
