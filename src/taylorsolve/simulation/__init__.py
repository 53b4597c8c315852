"""Simulation module for running systems of equations."""

from .base import Simulator
from .factory import create_simulator
from .taylor_engine import TaylorSimulator

__all__ = [
    "Simulator",
    "create_simulator",
    "TaylorSimulator",
]
