"""Fixed-step truncated Taylor-series integrator."""

from .dimension import DimensionState
from .parameters import ParameterVector
from .system import EquationSystem, GoverningEquation

__all__ = [
    "DimensionState",
    "EquationSystem",
    "GoverningEquation",
    "ParameterVector",
]
