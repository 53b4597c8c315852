"""Flat parameter vector passed to governing equations."""

from collections.abc import Sequence
from typing import Iterable, Optional, Tuple

from ..errors import InvalidArgumentError, OutOfRangeError


class ParameterVector(Sequence):
    """
    Read-only flat vector ``[x, x', ..., x^(order), y, y', ..., y^(order), ...]``.

    Indexes exactly like the flat list (stride ``order + 1`` per dimension), so
    governing equations written as ``x[0] * x[2]`` work unchanged. The typed
    accessors avoid stride arithmetic::

        x.dimension(1)       # every derivative of dimension 1
        x.derivative(1, 0)   # the primary value of dimension 1
    """

    __slots__ = ("_values", "order", "dimension_count")

    def __init__(self, values: Iterable[Optional[float]], order: int):
        self._values = tuple(values)
        self.order = order
        stride = order + 1
        if len(self._values) % stride:
            raise InvalidArgumentError(
                f"{len(self._values)} values do not divide into stride {stride}"
            )
        self.dimension_count = len(self._values) // stride

    @property
    def stride(self) -> int:
        return self.order + 1

    def __getitem__(self, index):
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other) -> bool:
        if isinstance(other, ParameterVector):
            return self._values == other._values and self.order == other.order
        if isinstance(other, (list, tuple)):
            return list(self._values) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._values, self.order))

    def __repr__(self) -> str:
        return f"ParameterVector({list(self._values)!r}, order={self.order})"

    def dimension(self, index: int) -> Tuple[Optional[float], ...]:
        """All ``order + 1`` derivatives of dimension ``index``."""
        if not 0 <= index < self.dimension_count:
            raise OutOfRangeError(f"Dimension {index} does not exist.")
        start = index * self.stride
        return self._values[start : start + self.stride]

    def derivative(self, index: int, order: int) -> Optional[float]:
        """Derivative ``order`` of dimension ``index``."""
        if not 0 <= order <= self.order:
            raise InvalidArgumentError(
                f"Derivative order must be in [0, {self.order}], got {order}"
            )
        return self.dimension(index)[order]

    def as_list(self) -> list:
        return list(self._values)
