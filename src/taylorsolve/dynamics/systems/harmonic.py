from typing import Any, Dict, List, Sequence
from ..base import DynamicalSystem
from ...equation import GoverningEquation


class HarmonicOscillator(DynamicalSystem):
    """Undamped simple harmonic oscillator ``x'' = -omega**2 * x``."""

    variable_names = ("x",)
    order = 2

    def __init__(self):
        super().__init__()
        self.omega = 1.0

    def configure(self, parameters: Dict[str, Any]) -> None:
        self.omega = float(parameters.get("omega", self.omega))

    def default_initial_conditions(self) -> Dict[str, List[float]]:
        return {"x": [1.0, 0.0]}

    def governing_equations(self) -> Sequence[GoverningEquation]:
        return [self.ddx]

    def ddx(self, t, x):
        return -self.omega**2 * x[0]
