import math


def get_orbital_elements(
    semi_major_axis: float, orbital_eccentricity: float, host_mass: float
) -> tuple[float, float, float]:
    """
    Perihelion and aphelion (AU) and orbital period (years) of a Keplerian orbit.

    The period follows Kepler's third law, with the host mass in Msol.
    """
    perihelion = (1.0 - orbital_eccentricity) * semi_major_axis
    aphelion = (1.0 + orbital_eccentricity) * semi_major_axis
    orbital_period = math.sqrt(semi_major_axis**3.0 / host_mass)
    return perihelion, aphelion, orbital_period
