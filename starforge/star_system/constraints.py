import logging
from typing import Optional

import pydantic
from typing_extensions import Self

from starforge.constraints import BaseConstraints, resolve
from starforge.random_stream import RandomStream, bernoulli
from starforge.star import StarConstraints
from starforge.star_system.constants import PROBABILITY_OF_BINARY_STARS
from starforge.star_system.subsystem import Double, Single, Subsystem

logger = logging.getLogger(__name__)


class StarSubsystemConstraints(BaseConstraints):
    """
    Constraints for creating a subsystem tree.

    The same record applies at every level of the tree. ``maximum_depth`` caps the
    nesting: a node at that depth is always a single star. Leave it unset for no cap,
    which requires a binary probability below 0.5.
    """

    binary_probability: Optional[float] = pydantic.Field(default=None, ge=0, le=1)
    star_constraints: Optional[StarConstraints] = None
    maximum_depth: Optional[int] = pydantic.Field(default=None, ge=0)

    @pydantic.model_validator(mode="after")
    def check_termination(self) -> Self:
        # Each split spawns two nodes, so an uncapped tree only stays finite below one half
        binary_probability = resolve(self.binary_probability, PROBABILITY_OF_BINARY_STARS)
        if self.maximum_depth is None and binary_probability >= 0.5:
            raise ValueError(
                f"binary_probability ({binary_probability}) must be below 0.5 unless maximum_depth is set"
            )
        return self

    @classmethod
    def habitable(cls) -> "StarSubsystemConstraints":
        return cls(star_constraints=StarConstraints.habitable())

    def generate(self, rng: RandomStream, depth: int = 0) -> Subsystem:
        """
        Args:
            rng: Random stream to draw from.
            depth: Nesting level of the node being generated, 0 for the root.

        Returns:
            A single star, or a double whose heavier half comes first.
        """
        at_maximum_depth = self.maximum_depth is not None and depth >= self.maximum_depth
        if not at_maximum_depth and bernoulli(rng, resolve(self.binary_probability, PROBABILITY_OF_BINARY_STARS)):
            logger.debug(f"Splitting subsystem at depth {depth}")
            first = self.generate(rng, depth + 1)
            second = self.generate(rng, depth + 1)
            return Double.from_pair(first, second)

        star_constraints = resolve(self.star_constraints, StarConstraints.default())
        return Single(star_constraints.generate(rng))


class StarSystemConstraints(BaseConstraints):
    """
    Constraints for creating a star system.

    ``retries`` counts the re-attempts allowed after the first one, so ``retries=0``
    makes exactly one attempt.
    """

    subsystem_constraints: Optional[StarSubsystemConstraints] = None
    retries: Optional[int] = pydantic.Field(default=None, ge=0)
    enforce_habitability: bool = False

    @classmethod
    def habitable(cls) -> "StarSystemConstraints":
        return cls(subsystem_constraints=StarSubsystemConstraints.habitable(), enforce_habitability=True)
