# Terrestrial planet masses are in Earth masses, gas giant masses in Jupiter masses.
# Distances in AU, orbital periods in years.

TERRESTRIAL_MINIMUM_MASS = 0.1
TERRESTRIAL_MAXIMUM_MASS = 10.0
TERRESTRIAL_MINIMUM_HABITABLE_MASS = 0.3
TERRESTRIAL_MAXIMUM_HABITABLE_MASS = 3.5
TERRESTRIAL_MINIMUM_ORBITAL_ECCENTRICITY = 0.0
TERRESTRIAL_MAXIMUM_ORBITAL_ECCENTRICITY = 0.25
TERRESTRIAL_MAXIMUM_HABITABLE_ORBITAL_ECCENTRICITY = 0.1
# Rocky mass-radius relation, R = M ** exponent (Earth units)
TERRESTRIAL_RADIUS_EXPONENT = 0.28
EARTH_ESCAPE_VELOCITY = 11.186  # km/s

GAS_GIANT_MINIMUM_MASS = 0.1
GAS_GIANT_MAXIMUM_MASS = 13.0
GAS_GIANT_MASS_LOG_MEAN = 0.2
GAS_GIANT_MASS_LOG_SIGMA = 0.5
GAS_GIANT_ORBITAL_ECCENTRICITY = 0.0167
