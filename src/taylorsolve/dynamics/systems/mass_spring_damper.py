import math
from typing import Any, Callable, Dict, List, Sequence
import numpy as np
from ..base import DynamicalSystem
from ...equation import GoverningEquation
from ...errors import InvalidArgumentError


class MassSpringDamper(DynamicalSystem):
    """
    Forced mass-spring-damper ``m x'' + b x' + k x = F(t)``.

    The forcing defaults to zero. A sinusoid can be configured through the
    ``forcing`` parameter::

        forcing: {amplitude: 1.0, frequency: 2.0, phase: 0.0}

    or any callable ``F(t)`` can be set with :meth:`set_forcing_function`.
    """

    variable_names = ("x",)
    order = 2

    def __init__(self):
        super().__init__()
        self.m = 1.0
        self.b = 0.5
        self.k = 1.0
        self.forcing: Callable[[float], float] = lambda t: 0.0

    def configure(self, parameters: Dict[str, Any]) -> None:
        self.m = float(parameters.get("m", self.m))
        self.b = float(parameters.get("b", self.b))
        self.k = float(parameters.get("k", self.k))
        if self.m == 0:
            raise InvalidArgumentError("Mass must be non-zero")

        forcing = parameters.get("forcing")
        if forcing:
            amplitude = float(forcing.get("amplitude", 0.0))
            frequency = float(forcing.get("frequency", 1.0))
            phase = float(forcing.get("phase", 0.0))
            self.forcing = lambda t: amplitude * math.sin(frequency * t + phase)

    def set_forcing_function(self, f: Callable[[float], float]) -> None:
        if not callable(f):
            raise InvalidArgumentError(f"Forcing function must be callable, got {f!r}")
        self.forcing = f

    def default_initial_conditions(self) -> Dict[str, List[float]]:
        return {"x": [0.0, 0.0]}

    def governing_equations(self) -> Sequence[GoverningEquation]:
        return [self.ddx]

    def ddx(self, t, x):
        return (-self.b * x[1] - self.k * x[0] + self.forcing(t)) / self.m

    def forcing_history(self) -> np.ndarray:
        """Forcing sampled on the recorded time axis."""
        return np.asarray([self.forcing(t) for t in self.equations.time_series()])

    def get_result(self) -> Dict[str, np.ndarray]:
        result = super().get_result()
        result["f"] = self.forcing_history()
        return result
