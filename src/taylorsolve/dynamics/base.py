"""Base classes for systems of equations."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple
import numpy as np

from ..config.schemas import SystemConfig
from ..equation import EquationSystem, GoverningEquation
from ..errors import InvalidArgumentError


class DynamicalSystem(ABC):
    """
    Abstract base class for a concrete system of ODEs.

    Subclasses declare their variables and order, provide one governing
    equation per variable and default initial conditions. The integration
    itself is delegated to an :class:`EquationSystem`.
    """

    variable_names: Tuple[str, ...] = ()
    order: int = 1

    def __init__(self):
        self.config: Optional[SystemConfig] = None
        self.equations: Optional[EquationSystem] = None
        self.parameters: Dict[str, Any] = {}
        self.initial_conditions: Dict[str, List[float]] = {}
        self.initialized: bool = False

    @property
    def dimension_count(self) -> int:
        return len(self.variable_names)

    def initialize(self, config: SystemConfig) -> None:
        """
        Initialize the system with the provided configuration.

        Args:
            config: Configuration object specifying system parameters and
                initial conditions
        """
        self.config = config
        self.parameters = dict(config.parameters)
        self.configure(self.parameters)

        initial_conditions = self.default_initial_conditions()
        for name, values in config.initial_conditions.items():
            if name not in self.variable_names:
                raise InvalidArgumentError(
                    f"Unknown variable {name!r} for {self.__class__.__name__}; "
                    f"expected one of {list(self.variable_names)}"
                )
            if not isinstance(values, (list, tuple)):
                values = [values]
            initial_conditions[name] = [float(v) for v in values]
        self.initial_conditions = initial_conditions

        self.equations = EquationSystem(self.dimension_count, self.order)
        for i, f in enumerate(self.governing_equations()):
            self.equations.set_governing_equation(i, f)
        self.apply_initial_conditions()
        self.initialized = True

    def configure(self, parameters: Dict[str, Any]) -> None:
        """Read system-specific parameters. Called before the equations are built."""

    @abstractmethod
    def governing_equations(self) -> Sequence[GoverningEquation]:
        """
        Return one governing equation per variable, in variable order.

        Each callable takes ``(t, x)`` where ``x`` is the flat parameter vector
        and returns the highest-order derivative of its variable.
        """
        pass

    @abstractmethod
    def default_initial_conditions(self) -> Dict[str, List[float]]:
        """Initial conditions used for variables missing from the configuration."""
        pass

    def apply_initial_conditions(self) -> None:
        for i, name in enumerate(self.variable_names):
            self.equations.set_initial_conditions(i, self.initial_conditions[name])

    def solve(self, t0: float, dt: float, tf: float) -> None:
        """Solve from ``t0`` to ``tf``, discarding any previous solution."""
        if not self.initialized:
            raise RuntimeError("System not initialized")
        if self.equations.is_solved:
            self.equations.reset()
            self.apply_initial_conditions()
        self.equations.solve(t0, dt, tf)

    def get_result(self) -> Dict[str, np.ndarray]:
        """Time axis and order-0 values of every variable."""
        result = {"t": np.asarray(self.equations.time_series())}
        for i, name in enumerate(self.variable_names):
            result[name] = np.asarray(self.equations.data_for(i, 0))
        return result

    def get_state_info(self) -> Dict[str, Any]:
        """
        Get information about the current state.

        Returns:
            Dictionary with state information
        """
        if not self.initialized:
            return {"initialized": False}

        info = {
            "initialized": True,
            "variables": list(self.variable_names),
            "order": self.order,
            "n_timesteps": self.equations.step_count,
        }
        if self.equations.is_solved:
            info["final_values"] = {
                name: self.equations.data_for(i, 0)[-1]
                for i, name in enumerate(self.variable_names)
            }
        return info

    def print_info(self) -> None:
        """Print information about the system."""
        print(f"System type: {self.__class__.__name__}")
        print(f"Initialized: {self.initialized}")
        if self.initialized:
            print(f"Variables: {', '.join(self.variable_names)}")
            print(f"Order: {self.order}")
            print(f"Parameters: {self.parameters}")
