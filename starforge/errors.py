class StarforgeError(Exception):
    """Base class for every failure raised while generating or checking a body."""


class OutOfRangeError(StarforgeError, ValueError):
    """A physical quantity lies outside the valid domain of a formula."""


class ConstraintUnsatisfiableError(StarforgeError):
    """A resolved minimum exceeds its resolved maximum."""

    def __init__(self, quantity: str, minimum: float, maximum: float):
        super().__init__(f"Cannot sample {quantity}: minimum {minimum} exceeds maximum {maximum}")
        self.quantity = quantity
        self.minimum = minimum
        self.maximum = maximum


class RetryExhaustedError(StarforgeError):
    """No suitable candidate was produced within the allowed number of attempts."""

    def __init__(self, attempts: int):
        super().__init__(f"No suitable subsystem could be generated in {attempts} attempt(s)")
        self.attempts = attempts


class NotHabitableError(StarforgeError):
    """A generated body failed an explicit habitability check."""
