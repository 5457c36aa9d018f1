"""
Random-source capability consumed by every generator.

Generators only rely on the ``RandomStream`` protocol, which a
``numpy.random.Generator`` satisfies out of the box. Deterministic substitutes
can be supplied for testing.
"""

from typing import Protocol, Sequence

import numpy as np

from starforge.errors import ConstraintUnsatisfiableError


class RandomStream(Protocol):
    def uniform(self, low: float, high: float) -> float: ...

    def random(self) -> float: ...

    def normal(self, loc: float, scale: float) -> float: ...

    def lognormal(self, mean: float, sigma: float) -> float: ...

    def integers(self, low: int, high: int) -> int: ...


def sample_uniform(rng: RandomStream, minimum: float, maximum: float, quantity: str) -> float:
    """
    Draw uniformly from the half-open range [minimum, maximum).

    Raises:
        ConstraintUnsatisfiableError: if minimum exceeds maximum.
    """
    if minimum > maximum:
        raise ConstraintUnsatisfiableError(quantity, minimum, maximum)
    return float(rng.uniform(minimum, maximum))


def bernoulli(rng: RandomStream, probability: float) -> bool:
    return float(rng.random()) < probability


def weighted_choice(rng: RandomStream, choices: Sequence, weights: Sequence[float]):
    if len(choices) == 0 or len(choices) != len(weights):
        raise ValueError("Choices and weights must be non-empty and of the same length")

    cumulative = np.cumsum(np.asarray(weights, dtype=float))
    threshold = float(rng.random()) * cumulative[-1]
    index = int(np.searchsorted(cumulative, threshold, side="right"))
    return choices[min(index, len(choices) - 1)]


def random_point_in_sphere(rng: RandomStream, radius: float = 1.0) -> tuple[float, float, float]:
    """
    Uniformly distributed point inside a sphere centered on the origin.

    The direction comes from three standard normal variates and the distance
    from the cube root of a uniform draw, so no rejection loop is involved.
    """
    direction = np.array([rng.normal(0.0, 1.0) for _ in range(3)], dtype=float)
    norm = float(np.linalg.norm(direction))
    if norm == 0.0:
        return 0.0, 0.0, 0.0

    distance = radius * float(rng.random()) ** (1.0 / 3.0)
    x, y, z = direction / norm * distance
    return float(x), float(y), float(z)
