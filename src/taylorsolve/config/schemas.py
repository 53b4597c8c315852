"""Configuration schemas for taylorsolve."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class SystemConfig:
    """Configuration for the system of equations being solved."""

    type: str = "lorenz"
    """Registered system type (e.g., 'lorenz', 'mass_spring_damper', 'custom')"""

    parameters: Dict[str, Any] = field(default_factory=dict)
    """System-specific parameters"""

    initial_conditions: Dict[str, Any] = field(default_factory=dict)
    """Initial conditions per variable name, each a list of `order` values"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "type": self.type,
            "parameters": self.parameters,
            "initial_conditions": self.initial_conditions,
        }


@dataclass
class TimeConfig:
    """Time configuration for simulation."""

    t0: float = 0.0
    """Start time"""

    dt: float = 0.01
    """Fixed time step"""

    tf: float = 10.0
    """End time (inclusive)"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"t0": self.t0, "dt": self.dt, "tf": self.tf}


@dataclass
class SimulationConfig:
    """Configuration for simulation."""

    solver: str = "taylor"
    """Simulator type"""

    time: TimeConfig = field(default_factory=TimeConfig)
    """Time configuration"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"solver": self.solver, "time": self.time.to_dict()}


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""

    backend: str = "matplotlib"
    """Visualization backend"""

    save_path: Optional[str] = None
    """Path to save the figure"""

    orders: List[int] = field(default_factory=lambda: [0])
    """Derivative orders to plot against time"""

    phase_portrait: bool = False
    """Whether to also draw a phase portrait of the order-0 values"""

    parameters: Dict[str, Any] = field(default_factory=dict)
    """Backend-specific parameters"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "backend": self.backend,
            "save_path": self.save_path,
            "orders": self.orders,
            "phase_portrait": self.phase_portrait,
            "parameters": self.parameters,
        }


@dataclass
class EvaluationConfig:
    """Configuration for comparison against a reference solution."""

    reference_solver: str = "tsit5"
    """diffrax solver used for the reference solution"""

    rtol: float = 1e-5
    """Relative tolerance of the reference solver"""

    atol: float = 1e-7
    """Absolute tolerance of the reference solver"""

    max_steps: int = 100000
    """Maximum number of reference solver steps"""

    save_results: bool = True
    """Whether to include the metrics in the pipeline summary"""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "reference_solver": self.reference_solver,
            "rtol": self.rtol,
            "atol": self.atol,
            "max_steps": self.max_steps,
            "save_results": self.save_results,
        }
