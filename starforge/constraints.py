from typing import ClassVar, Optional, TypeVar

import pydantic
from typing_extensions import Self

T = TypeVar("T")


def resolve(value: Optional[T], default: T) -> T:
    """Use the explicit override when set, otherwise the named default."""
    return default if value is None else value


class BaseConstraints(pydantic.BaseModel):
    """
    Immutable record of optional generation bounds.

    Subclasses list their (minimum, maximum) field pairs in ``bound_pairs``; when
    both ends of a pair are set the minimum must not exceed the maximum.
    """

    model_config = pydantic.ConfigDict(frozen=True, extra="forbid")

    bound_pairs: ClassVar[tuple[tuple[str, str], ...]] = ()

    @pydantic.model_validator(mode="after")
    def check_bounds(self) -> Self:
        for minimum_field, maximum_field in self.bound_pairs:
            minimum = getattr(self, minimum_field)
            maximum = getattr(self, maximum_field)
            if minimum is not None and maximum is not None and minimum > maximum:
                raise ValueError(f"{minimum_field} ({minimum}) must not exceed {maximum_field} ({maximum})")
        return self

    @classmethod
    def default(cls) -> Self:
        """No constraints: every field resolves to its named default."""
        return cls()
