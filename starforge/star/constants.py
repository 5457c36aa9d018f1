# Masses in Msol, luminosities in Lsol, radii in Rsol, ages in Gyr, distances in AU.

# Main-sequence domain of the mass-driven formulas.
MINIMUM_MASS = 0.075
MAXIMUM_MASS = 150.0

# Smallest mass a generated star may receive.
MINIMUM_MAIN_SEQUENCE_STAR_MASS = 0.08

MINIMUM_HABITABLE_MASS = 0.55
MAXIMUM_HABITABLE_MASS = 1.25
MINIMUM_HABITABLE_AGE = 4.0

MINIMUM_AGE_FRACTION = 0.1
MAXIMUM_AGE_FRACTION = 0.9

SUN_TEMPERATURE = 5778.0

HABITABLE_ZONE_INNER_FLUX = 1.1
HABITABLE_ZONE_OUTER_FLUX = 0.53
FROST_LINE_COEFFICIENT = 4.85

SATELLITE_ZONE_INNER_COEFFICIENT = 0.1
SATELLITE_ZONE_OUTER_COEFFICIENT = 40.0
