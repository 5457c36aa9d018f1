# Light years
RADIUS_OF_STELLAR_NEIGHBORHOOD = 10.0

# Star systems per cubic light year
STELLAR_NEIGHBORHOOD_DENSITY = 0.004
