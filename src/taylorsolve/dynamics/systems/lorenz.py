from typing import Any, Dict, List, Sequence
from ..base import DynamicalSystem
from ...equation import GoverningEquation


class LorenzAttractor(DynamicalSystem):
    """
    Lorenz system, three coupled first-order equations::

        x' = sigma * (y - x)
        y' = x * (rho - z) - y
        z' = x * y - beta * z

    With order 1 the parameter vector is ``[x, x', y, y', z, z']``.
    """

    variable_names = ("x", "y", "z")
    order = 1

    def __init__(self):
        super().__init__()
        self.sigma = 10.0
        self.rho = 28.0
        self.beta = 8.0 / 3.0

    def configure(self, parameters: Dict[str, Any]) -> None:
        self.sigma = float(parameters.get("sigma", self.sigma))
        self.rho = float(parameters.get("rho", self.rho))
        self.beta = float(parameters.get("beta", self.beta))

    def default_initial_conditions(self) -> Dict[str, List[float]]:
        return {"x": [1.0], "y": [1.0], "z": [1.0]}

    def governing_equations(self) -> Sequence[GoverningEquation]:
        return [self.dx, self.dy, self.dz]

    def dx(self, t, x):
        return self.sigma * (x[2] - x[0])

    def dy(self, t, x):
        return x[0] * (self.rho - x[4]) - x[2]

    def dz(self, t, x):
        return x[0] * x[2] - self.beta * x[4]
