"""Derivative history for a single scalar dimension."""

import math
import numbers
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..errors import InvalidArgumentError


def is_real(value) -> bool:
    """True for real numbers, excluding booleans."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def check_positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < 1:
        raise InvalidArgumentError(f"{name} must be a positive integer, got {value!r}")
    return int(value)


class DimensionState:
    """
    Time history of every derivative order of one dimension.

    ``history[0]`` is the primary quantity and ``history[order]`` is the
    highest-order derivative, which is never computed here: it is supplied by
    the governing equation through :meth:`set_highest_order_derivative`.
    The lower orders are extrapolated by :meth:`step` with a truncated Taylor
    expansion using the previous step's values only.
    """

    def __init__(self, order: int):
        self.order = check_positive_int(order, "order")
        self._history: List[List[float]] = []
        self.reset()

    def set_initial_conditions(self, values: Sequence[float]) -> None:
        """
        Set ``[x(t0), x'(t0), ..., x^(order-1)(t0)]``.

        Args:
            values: Exactly ``order`` real numbers

        Raises:
            InvalidArgumentError: If the length or any entry is wrong, or if
                steps have already been recorded. Nothing is written in that
                case.
        """
        if self.current_step_index() > 0:
            raise InvalidArgumentError(
                "Initial conditions cannot change once steps are recorded; call reset() first"
            )
        if isinstance(values, np.ndarray):
            values = values.tolist()
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise InvalidArgumentError(
                f"Expected a sequence of {self.order} numbers, found {values!r}"
            )
        if len(values) != self.order:
            raise InvalidArgumentError(
                f"Expected {self.order} initial conditions, found {len(values)}: {list(values)!r}"
            )
        for value in values:
            if not is_real(value):
                raise InvalidArgumentError(
                    f"Initial conditions must be real numbers, found {value!r}"
                )

        for k, value in enumerate(values):
            if self._history[k]:
                self._history[k][0] = float(value)
            else:
                self._history[k].append(float(value))

    def set_highest_order_derivative(self, value: float) -> None:
        """Record the governing-equation output for the step being computed."""
        self._history[self.order].append(value)

    def step(self, dt: float) -> None:
        """
        Extrapolate every lower derivative to the next step.

        For ``s = current_step_index()`` and ``i < order``::

            history[i][s] = history[i][s-1]
                + sum(dt**(j-i) / (j-i)! * history[j][s-1] for j in i+1..order)
        """
        s = self.current_step_index()
        if s < 1:
            raise InvalidArgumentError(
                "Cannot step before the highest order derivative has been set"
            )

        for i in range(self.order):
            value = self._history[i][s - 1]
            for j in range(i + 1, self.order + 1):
                value += dt ** (j - i) * self._history[j][s - 1] / math.factorial(j - i)
            series = self._history[i]
            if len(series) > s:
                series[s] = value
            else:
                series.append(value)

    def current_step_index(self) -> int:
        """Index of the next highest-order write."""
        return len(self._history[self.order])

    def latest_derivative_vector(self) -> List[Optional[float]]:
        """All ``order + 1`` derivatives at the latest step (``None`` where absent)."""
        step = max(self.current_step_index() - 1, 0)
        return [series[step] if step < len(series) else None for series in self._history]

    def nth_derivative(self, n: int) -> Tuple[float, ...]:
        """Recorded values of derivative ``n`` in chronological order."""
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or not 0 <= n <= self.order:
            raise InvalidArgumentError(
                f"Derivative order must be in [0, {self.order}], got {n!r}"
            )
        return tuple(self._history[n])

    def has_initial_conditions(self) -> bool:
        return len(self._history[0]) > 0

    def reset(self) -> None:
        """Clear all recorded data."""
        self._history = [[] for _ in range(self.order + 1)]

    def __repr__(self) -> str:
        return f"DimensionState(order={self.order}, steps={self.current_step_index()})"
