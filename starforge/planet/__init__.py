"""Planets: terrestrial inside the frost line, gas giants beyond it."""

from .constraints import GasGiantPlanetConstraints, PlanetConstraints, TerrestrialPlanetConstraints
from .orbit import get_orbital_elements
from .planet import GasGiantPlanet, Planet, TerrestrialPlanet

__all__ = [
    "GasGiantPlanet",
    "GasGiantPlanetConstraints",
    "Planet",
    "PlanetConstraints",
    "TerrestrialPlanet",
    "TerrestrialPlanetConstraints",
    "get_orbital_elements",
]
