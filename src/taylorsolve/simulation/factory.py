"""Factory functions for creating simulators."""

from typing import Dict, Optional, Type
from rich.console import Console
from .base import Simulator
from .taylor_engine import TaylorSimulator
from ..config.schemas import SimulationConfig
from ..dynamics.base import DynamicalSystem


# Registry of available simulators
SIMULATOR_REGISTRY: Dict[str, Type[Simulator]] = {
    "taylor": TaylorSimulator,
}


def create_simulator(
    system: DynamicalSystem,
    config: SimulationConfig,
    console: Optional[Console] = None,
) -> Simulator:
    """
    Create a simulator from configuration.

    Args:
        system: System to simulate
        config: Simulation configuration
        console: Optional rich console for progress messages

    Returns:
        Configured simulator

    Raises:
        ValueError: If simulator type is not recognized
    """
    simulator_type = config.solver.lower()

    if simulator_type not in SIMULATOR_REGISTRY:
        available_types = list(SIMULATOR_REGISTRY.keys())
        raise ValueError(
            f"Unknown simulator type: {simulator_type}. "
            f"Available types: {available_types}"
        )

    simulator_class = SIMULATOR_REGISTRY[simulator_type]
    return simulator_class(system, config, console=console)
