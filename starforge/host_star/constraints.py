import logging
from typing import Optional, Union

import pydantic

from starforge.close_binary_star import CloseBinaryStar, CloseBinaryStarConstraints
from starforge.constraints import BaseConstraints, resolve
from starforge.host_star.constants import BINARY_STAR_PROBABILITY
from starforge.random_stream import RandomStream, bernoulli
from starforge.star import Star, StarConstraints

logger = logging.getLogger(__name__)

HostStar = Union[Star, CloseBinaryStar]


class HostStarConstraints(BaseConstraints):
    """Constraints for creating the star, or close pair of stars, that planets orbit."""

    binary_probability: Optional[float] = pydantic.Field(default=None, ge=0, le=1)
    star_constraints: Optional[StarConstraints] = None
    close_binary_star_constraints: Optional[CloseBinaryStarConstraints] = None

    @classmethod
    def habitable(cls) -> "HostStarConstraints":
        return cls(
            star_constraints=StarConstraints.habitable(),
            close_binary_star_constraints=CloseBinaryStarConstraints.habitable(),
        )

    def generate(self, rng: RandomStream) -> HostStar:
        is_binary = bernoulli(rng, resolve(self.binary_probability, BINARY_STAR_PROBABILITY))
        if is_binary:
            constraints = resolve(self.close_binary_star_constraints, CloseBinaryStarConstraints.default())
        else:
            constraints = resolve(self.star_constraints, StarConstraints.default())
        logger.debug(f"Generating a {'close binary' if is_binary else 'solitary'} host star")
        return constraints.generate(rng)
