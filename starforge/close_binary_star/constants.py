# Masses in Msol, separations in AU, ages in Gyr.
from starforge.star.constants import (  # noqa: F401
    MAXIMUM_HABITABLE_MASS,
    MAXIMUM_MASS,
    MINIMUM_HABITABLE_AGE,
    MINIMUM_HABITABLE_MASS,
    MINIMUM_MAIN_SEQUENCE_STAR_MASS,
)

MINIMUM_COMBINED_MASS = 0.2
MAXIMUM_COMBINED_MASS = 4.0
MINIMUM_INDIVIDUAL_MASS = MINIMUM_MAIN_SEQUENCE_STAR_MASS
MAXIMUM_INDIVIDUAL_MASS = MAXIMUM_MASS

MINIMUM_AVERAGE_SEPARATION = 0.1
MAXIMUM_AVERAGE_SEPARATION = 6.0

MINIMUM_ORBITAL_ECCENTRICITY = 0.0
MAXIMUM_ORBITAL_ECCENTRICITY = 0.7

MINIMUM_HABITABLE_COMBINED_MASS = 2 * MINIMUM_HABITABLE_MASS
MAXIMUM_HABITABLE_COMBINED_MASS = 2 * MAXIMUM_HABITABLE_MASS
MINIMUM_HABITABLE_INDIVIDUAL_MASS = MINIMUM_HABITABLE_MASS
MAXIMUM_HABITABLE_INDIVIDUAL_MASS = MAXIMUM_HABITABLE_MASS
MAXIMUM_HABITABLE_SEPARATION = 0.3

# Circumbinary orbits inside FORBIDDEN_ZONE_FACTOR * a * (1 + e) are unstable.
FORBIDDEN_ZONE_FACTOR = 4.0
