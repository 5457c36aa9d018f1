from dataclasses import dataclass


@dataclass(frozen=True)
class Moon:
    """A natural satellite. Mass in Earth masses, albedo dimensionless."""

    mass: float
    albedo: float
