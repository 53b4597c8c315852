"""Concrete systems of equations."""

from .lorenz import LorenzAttractor
from .mass_spring_damper import MassSpringDamper
from .harmonic import HarmonicOscillator
from .custom import CustomSystem

__all__ = [
    "LorenzAttractor",
    "MassSpringDamper",
    "HarmonicOscillator",
    "CustomSystem",
]
