import logging
from dataclasses import dataclass

from starforge.constraints import resolve
from starforge.errors import RetryExhaustedError, StarforgeError
from starforge.names import generate_star_system_name
from starforge.random_stream import RandomStream
from starforge.star import Star
from starforge.star_system.constants import DEFAULT_RETRIES
from starforge.star_system.constraints import StarSubsystemConstraints, StarSystemConstraints
from starforge.star_system.subsystem import Subsystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StarSystem:
    """
    One or more gravitationally bound stars under a single name.

    The stars are arranged as a subsystem tree; every physical quantity is taken
    from the root of that tree.
    """

    subsystem: Subsystem
    name: str

    @classmethod
    def from_constraints(cls, constraints: StarSystemConstraints, rng: RandomStream) -> "StarSystem":
        """
        Generate a star system, retrying the subsystem generation until it succeeds.

        This is the only place where generation failures are retried. An attempt fails
        when generating the subsystem raises, or when habitability is enforced and the
        subsystem is not habitable.

        Args:
            constraints: Constraints applied to the star system and its subsystem tree.
            rng: Random stream to draw from.

        Returns:
            The star system built from the first successful attempt.

        Raises:
            RetryExhaustedError: if all ``1 + retries`` attempts failed.
        """
        subsystem_constraints = resolve(constraints.subsystem_constraints, StarSubsystemConstraints.default())
        attempts = resolve(constraints.retries, DEFAULT_RETRIES) + 1

        for attempt in range(1, attempts + 1):
            try:
                subsystem = subsystem_constraints.generate(rng)
                if constraints.enforce_habitability:
                    subsystem.check_habitable()
            except StarforgeError as e:
                logger.debug(f"Attempt {attempt}/{attempts} rejected: {e}")
                continue

            name = generate_star_system_name(rng)
            logger.debug(f"Generated star system {name} with {subsystem.count} star(s) in {attempt} attempt(s)")
            return cls(subsystem=subsystem, name=name)

        logger.warning(f"Could not generate a suitable subsystem in {attempts} attempt(s)")
        raise RetryExhaustedError(attempts)

    @property
    def stellar_mass(self) -> float:
        return self.subsystem.mass

    @property
    def stellar_count(self) -> int:
        return self.subsystem.count

    @property
    def luminosity(self) -> float:
        return self.subsystem.luminosity

    @property
    def habitable_zone(self) -> tuple[float, float]:
        return self.subsystem.habitable_zone

    @property
    def frost_line(self) -> float:
        return self.subsystem.frost_line

    @property
    def satellite_zone(self) -> tuple[float, float]:
        return self.subsystem.satellite_zone

    @property
    def stars(self) -> list[Star]:
        return self.subsystem.stars

    def check_habitable(self):
        self.subsystem.check_habitable()

    @property
    def is_habitable(self) -> bool:
        return self.subsystem.is_habitable
