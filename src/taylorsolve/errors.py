"""Exception hierarchy for taylorsolve."""

from typing import Optional


class TaylorSolveError(Exception):
    """Base class for all taylorsolve errors."""


class InvalidArgumentError(TaylorSolveError, ValueError):
    """Malformed argument (initial conditions, callbacks, derivative orders)."""


class OutOfRangeError(TaylorSolveError, IndexError):
    """Dimension index outside ``[0, dimension_count)``."""


class AlreadyRegisteredError(TaylorSolveError, ValueError):
    """A governing equation is already registered for the dimension."""


class ValidationError(TaylorSolveError, RuntimeError):
    """
    Incomplete configuration detected before solving.

    Attributes:
        dimension: Index of the first offending dimension (None if not
            specific to one dimension)
        reason: Which precondition failed
    """

    def __init__(self, dimension: Optional[int], reason: str):
        self.dimension = dimension
        self.reason = reason
        if dimension is None:
            message = reason
        else:
            message = f"Dimension {dimension}: {reason}"
        super().__init__(message)
