"""Coupled multi-dimensional fixed-step integrator."""

import math
import numbers
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from ..errors import (
    AlreadyRegisteredError,
    InvalidArgumentError,
    OutOfRangeError,
    ValidationError,
)
from .dimension import DimensionState, check_positive_int, is_real
from .parameters import ParameterVector

GoverningEquation = Callable[[float, ParameterVector], float]

# Relative slack on the end-time comparison. It is widened by one ulp of the
# time span per expected step so that accumulated rounding in ``t`` does not
# drop the final step of long runs.
END_TIME_RTOL = 1e-9


def end_time_slack(t0: float, dt: float, tf: float) -> float:
    """Tolerance added to ``tf`` when deciding whether to take another step."""
    steps = max((tf - t0) / dt, 0.0) + 1.0
    slack = END_TIME_RTOL * dt + steps * (math.ulp(max(abs(t0), abs(tf))) + math.ulp(dt))
    return min(slack, 0.5 * dt)


class EquationSystem:
    """
    A system of ODEs of arbitrary order and number of dimensions.

    Every dimension shares the same ``order`` and has exactly one governing
    equation ``f(t, x)`` returning its highest-order derivative, where ``x`` is
    the flat parameter vector ``[x, dx, ..., y, dy, ...]`` built by
    :meth:`assemble_parameters`.

    Example:
        >>> system = EquationSystem(1, 2)
        >>> system.set_initial_conditions(0, [1.0, 0.0])
        >>> system.set_governing_equation(0, lambda t, x: -x[0])
        >>> system.solve(0.0, 0.01, 1.0)
        >>> len(system.time_series())
        101
    """

    def __init__(self, dimension_count: int, order: int):
        self.dimension_count = check_positive_int(dimension_count, "dimension_count")
        self.order = check_positive_int(order, "order")
        self.dimensions: List[DimensionState] = [
            DimensionState(self.order) for _ in range(self.dimension_count)
        ]
        self._governing_equations: List[Optional[GoverningEquation]] = [
            None
        ] * self.dimension_count
        self._time: List[float] = []

    def _check_dimension(self, dimension_index: int) -> None:
        if (
            isinstance(dimension_index, bool)
            or not isinstance(dimension_index, numbers.Integral)
            or not 0 <= dimension_index < self.dimension_count
        ):
            raise OutOfRangeError(f"Dimension {dimension_index} does not exist.")

    def set_initial_conditions(self, dimension_index: int, values: Sequence[float]) -> None:
        """Set the ``order`` initial conditions of one dimension."""
        self._check_dimension(dimension_index)
        self.dimensions[dimension_index].set_initial_conditions(values)

    def set_governing_equation(self, dimension_index: int, f: GoverningEquation) -> None:
        """
        Register the governing equation of one dimension.

        Args:
            dimension_index: Dimension the equation drives
            f: Callable ``f(t, x)`` returning the highest-order derivative

        Raises:
            OutOfRangeError: If the dimension does not exist
            InvalidArgumentError: If ``f`` is not callable
            AlreadyRegisteredError: If the dimension already has an equation
        """
        self._check_dimension(dimension_index)
        if not callable(f):
            raise InvalidArgumentError(
                f"Governing equation for dimension {dimension_index} must be callable, got {f!r}"
            )
        if self._governing_equations[dimension_index] is not None:
            raise AlreadyRegisteredError(
                f"Dimension {dimension_index} already has a governing equation"
            )
        self._governing_equations[dimension_index] = f

    def governing_equation(self, dimension_index: int) -> Optional[GoverningEquation]:
        self._check_dimension(dimension_index)
        return self._governing_equations[dimension_index]

    def assemble_parameters(self) -> ParameterVector:
        """Concatenate the latest derivative vector of every dimension."""
        values = []
        for dimension in self.dimensions:
            values.extend(dimension.latest_derivative_vector())
        return ParameterVector(values, self.order)

    def validate(self, t0: float = 0.0) -> bool:
        """
        Check that the system is ready to be solved.

        Raises:
            ValidationError: For the first dimension missing initial
                conditions, then the first missing a governing equation,
                then the first whose equation does not return a real number.
        """
        if self._time:
            raise ValidationError(
                None, "System has already been solved; call reset() first"
            )
        for i, dimension in enumerate(self.dimensions):
            if not dimension.has_initial_conditions():
                raise ValidationError(i, "initial conditions not set")
        for i, f in enumerate(self._governing_equations):
            if f is None:
                raise ValidationError(i, "no governing equation registered")

        parameters = self.assemble_parameters()
        for i, f in enumerate(self._governing_equations):
            try:
                result = f(t0, parameters)
            except Exception as exc:
                raise ValidationError(
                    i, f"governing equation raised {type(exc).__name__}: {exc}"
                ) from exc
            if not is_real(result):
                raise ValidationError(
                    i, f"governing equation does not return a number (got {result!r})"
                )
        return True

    def solve(self, t0: float, dt: float, tf: float) -> None:
        """
        Solve from ``t0`` to ``tf`` with fixed timestep ``dt``.

        Dimensions are advanced in index order and each one assembles its own
        parameters right before stepping, so a dimension sees the new step of
        every dimension before it and the previous step of itself and every
        dimension after it.

        Raises:
            InvalidArgumentError: If ``dt`` is not a positive number or ``t0``
                or ``tf`` is not a finite number. Nothing is recorded.
            ValidationError: See :meth:`validate`. Nothing is recorded.

        An exception raised by a governing equation after validation
        propagates unchanged and leaves the histories of different lengths;
        call :meth:`reset` before using the system again.
        """
        if not is_real(dt) or not math.isfinite(dt) or not dt > 0:
            raise InvalidArgumentError(f"dt must be a positive number, got {dt!r}")
        for name, value in (("t0", t0), ("tf", tf)):
            if not is_real(value) or not math.isfinite(value):
                raise InvalidArgumentError(f"{name} must be a finite number, got {value!r}")
        self.validate(t0)

        # Highest order derivatives from the initial conditions
        parameters = self.assemble_parameters()
        for dimension, f in zip(self.dimensions, self._governing_equations):
            dimension.set_highest_order_derivative(f(t0, parameters))
        self._time.append(t0)

        end = tf + end_time_slack(t0, dt, tf)
        t = t0 + dt
        while t <= end:
            for dimension, f in zip(self.dimensions, self._governing_equations):
                parameters = self.assemble_parameters()
                dimension.step(dt)
                dimension.set_highest_order_derivative(f(t, parameters))
            self._time.append(t)
            t += dt

    def data_for(self, dimension_index: int, order: int) -> Tuple[float, ...]:
        """All recorded values of derivative ``order`` in one dimension."""
        self._check_dimension(dimension_index)
        return self.dimensions[dimension_index].nth_derivative(order)

    def time_series(self) -> Tuple[float, ...]:
        return tuple(self._time)

    @property
    def is_solved(self) -> bool:
        return bool(self._time)

    @property
    def step_count(self) -> int:
        return len(self._time)

    def to_array(self) -> np.ndarray:
        """Recorded data as an array of shape ``(T, dimension_count, order + 1)``."""
        data = np.empty((len(self._time), self.dimension_count, self.order + 1))
        if not self._time:
            return data
        for i in range(self.dimension_count):
            for k in range(self.order + 1):
                data[:, i, k] = self.data_for(i, k)
        return data

    def reset(self) -> None:
        """Clear the time axis and every dimension's history."""
        self._time = []
        for dimension in self.dimensions:
            dimension.reset()

    def __repr__(self) -> str:
        return (
            f"EquationSystem(dimension_count={self.dimension_count}, "
            f"order={self.order}, steps={len(self._time)})"
        )
