"""Configuration management for taylorsolve."""

from .core import Config, load_config, save_config
from .schemas import (
    SystemConfig,
    TimeConfig,
    SimulationConfig,
    VisualizationConfig,
    EvaluationConfig,
)

__all__ = [
    "Config",
    "load_config",
    "save_config",
    "SystemConfig",
    "TimeConfig",
    "SimulationConfig",
    "VisualizationConfig",
    "EvaluationConfig",
]
