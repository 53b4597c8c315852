"""
taylorsolve: fixed-step truncated Taylor-series solver for systems of ODEs.

Systems of any order and number of dimensions are advanced in lock-step by
extrapolating every lower derivative from the previous step, with the highest
derivative of each dimension supplied by a governing equation ``f(t, x)``.

Example:
    >>> import taylorsolve as ts
    >>>
    >>> # Use the integrator directly
    >>> system = ts.EquationSystem(1, 2)
    >>> system.set_initial_conditions(0, [1.0, 0.0])
    >>> system.set_governing_equation(0, lambda t, x: -x[0])
    >>> system.solve(0.0, 0.01, 1.0)
    >>> positions = system.data_for(0, 0)
    >>>
    >>> # Or run a configured system end to end
    >>> config = ts.load_config("configs/lorenz.yaml")
    >>> results = ts.run_full_pipeline(config)
"""

__version__ = "0.1.0"

# Core integrator
from .equation import DimensionState, EquationSystem, ParameterVector
from .errors import (
    TaylorSolveError,
    InvalidArgumentError,
    OutOfRangeError,
    AlreadyRegisteredError,
    ValidationError,
)

# Configured workflow
from .config import load_config, Config
from .dynamics import create_system, DynamicalSystem
from .simulation import create_simulator, Simulator
from .visualization import create_visualizer
from .evaluation import create_evaluator
from .workflow import run_full_pipeline

__all__ = [
    "DimensionState",
    "EquationSystem",
    "ParameterVector",
    "TaylorSolveError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "AlreadyRegisteredError",
    "ValidationError",
    "load_config",
    "Config",
    "create_system",
    "DynamicalSystem",
    "create_simulator",
    "Simulator",
    "create_visualizer",
    "create_evaluator",
    "run_full_pipeline",
]
