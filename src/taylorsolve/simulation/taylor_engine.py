"""Fixed-step truncated Taylor-series simulation engine."""

from typing import Optional, Tuple
import numpy as np
from rich.console import Console
from .base import Simulator
from ..config.schemas import SimulationConfig
from ..dynamics.base import DynamicalSystem


class TaylorSimulator(Simulator):
    """Simulator driving a system's :class:`EquationSystem` with a fixed step."""

    def __init__(
        self,
        system: DynamicalSystem,
        config: SimulationConfig,
        console: Optional[Console] = None,
    ):
        super().__init__(system, config)
        self.console = console

    def run(self) -> Tuple[np.ndarray, np.ndarray]:
        time = self.config.time
        if self.console is not None:
            self.console.print(
                f"Running Taylor simulation of order {self.system.order}: "
                f"t={time.t0} to {time.tf}, dt={time.dt}"
            )

        self.system.solve(float(time.t0), float(time.dt), float(time.tf))

        equations = self.system.equations
        trajectory = equations.to_array()
        times = np.asarray(equations.time_series())

        self.results = (trajectory, times)
        return trajectory, times
