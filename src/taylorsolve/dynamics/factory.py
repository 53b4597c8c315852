"""Factory functions for creating systems of equations."""

from typing import Dict, Type
from .base import DynamicalSystem
from ..config.schemas import SystemConfig

from .systems.lorenz import LorenzAttractor
from .systems.mass_spring_damper import MassSpringDamper
from .systems.harmonic import HarmonicOscillator
from .systems.custom import CustomSystem


# Registry of available systems
SYSTEM_REGISTRY: Dict[str, Type[DynamicalSystem]] = {
    "lorenz": LorenzAttractor,
    "mass_spring_damper": MassSpringDamper,
    "harmonic": HarmonicOscillator,
    "custom": CustomSystem,
}


def create_system(config: SystemConfig) -> DynamicalSystem:
    """
    Create a system of equations from configuration.

    Args:
        config: Configuration specifying the system type and parameters

    Returns:
        Initialized system with equations and initial conditions registered

    Raises:
        ValueError: If system type is not recognized
    """
    system_type = config.type.lower()

    if system_type not in SYSTEM_REGISTRY:
        available_types = list(SYSTEM_REGISTRY.keys())
        raise ValueError(
            f"Unknown system type: {config.type}. "
            f"Available types: {available_types}"
        )

    system = SYSTEM_REGISTRY[system_type]()
    system.initialize(config)

    return system


def register_system(name: str, system_class: Type[DynamicalSystem]) -> None:
    """
    Register a new system type.

    Args:
        name: Name to register the system under
        system_class: DynamicalSystem class to register
    """
    if not isinstance(system_class, type) or not issubclass(system_class, DynamicalSystem):
        raise ValueError("system_class must be a subclass of DynamicalSystem")

    SYSTEM_REGISTRY[name] = system_class


def list_available_systems() -> Dict[str, Type[DynamicalSystem]]:
    """Get a dictionary of all available system types."""
    return SYSTEM_REGISTRY.copy()
