"""Concrete systems of equations built on the integrator."""

from .base import DynamicalSystem
from .factory import create_system, register_system, list_available_systems
from . import systems

__all__ = [
    "DynamicalSystem",
    "create_system",
    "register_system",
    "list_available_systems",
    "systems",
]
