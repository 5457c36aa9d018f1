"""
Recursive star subsystem tree.

A subsystem is either a ``Single`` star or a ``Double`` pairing two further
subsystems. Every quantity of a ``Double`` is aggregated bottom-up from its
leaves; zones are recomputed from the combined luminosity and mass rather
than merged from the children.
"""

from dataclasses import dataclass
from typing import Union

from typing_extensions import Self

from starforge.errors import NotHabitableError
from starforge.star import Star
from starforge.star.math import frost_line_from_luminosity, habitable_zone_from_luminosity, satellite_zone_from_mass


@dataclass(frozen=True)
class Single:
    star: Star

    @property
    def mass(self) -> float:
        return self.star.mass

    @property
    def count(self) -> int:
        return 1

    @property
    def luminosity(self) -> float:
        return self.star.luminosity

    @property
    def habitable_zone(self) -> tuple[float, float]:
        return self.star.habitable_zone

    @property
    def frost_line(self) -> float:
        return self.star.frost_line

    @property
    def satellite_zone(self) -> tuple[float, float]:
        return self.star.satellite_zone

    @property
    def depth(self) -> int:
        return 0

    @property
    def stars(self) -> list[Star]:
        return [self.star]

    def check_habitable(self):
        self.star.check_habitable()

    @property
    def is_habitable(self) -> bool:
        return self.star.is_habitable


@dataclass(frozen=True)
class Double:
    """Two subsystems bound to each other, the heavier one first."""

    primary: "Subsystem"
    secondary: "Subsystem"

    def __post_init__(self):
        if self.primary.mass < self.secondary.mass:
            raise ValueError(
                f"Primary subsystem ({self.primary.mass:.3f} Msol) is lighter than "
                f"the secondary subsystem ({self.secondary.mass:.3f} Msol)"
            )

    @classmethod
    def from_pair(cls, first: "Subsystem", second: "Subsystem") -> Self:
        """Build a double from two subsystems in any order."""
        if first.mass >= second.mass:
            return cls(primary=first, secondary=second)
        return cls(primary=second, secondary=first)

    @property
    def mass(self) -> float:
        return self.primary.mass + self.secondary.mass

    @property
    def count(self) -> int:
        return self.primary.count + self.secondary.count

    @property
    def luminosity(self) -> float:
        return self.primary.luminosity + self.secondary.luminosity

    @property
    def habitable_zone(self) -> tuple[float, float]:
        return habitable_zone_from_luminosity(self.luminosity)

    @property
    def frost_line(self) -> float:
        return frost_line_from_luminosity(self.luminosity)

    @property
    def satellite_zone(self) -> tuple[float, float]:
        return satellite_zone_from_mass(self.mass)

    @property
    def depth(self) -> int:
        return 1 + max(self.primary.depth, self.secondary.depth)

    @property
    def stars(self) -> list[Star]:
        return self.primary.stars + self.secondary.stars

    def check_habitable(self):
        """
        A double is habitable as soon as either of its subsystems is.

        Raises:
            NotHabitableError: if neither subsystem is habitable.
        """
        if not self.primary.is_habitable and not self.secondary.is_habitable:
            raise NotHabitableError(f"Neither subsystem of this {self.count}-star double is habitable")

    @property
    def is_habitable(self) -> bool:
        try:
            self.check_habitable()
        except NotHabitableError:
            return False
        return True


Subsystem = Union[Single, Double]
