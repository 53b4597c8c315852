"""Core configuration management."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import yaml
from omegaconf import DictConfig, OmegaConf

from .schemas import (
    SystemConfig,
    SimulationConfig,
    VisualizationConfig,
    EvaluationConfig,
    TimeConfig,
)

SECTIONS = {"system", "simulation", "visualization", "evaluation"}


class Config:
    """Main configuration container for taylorsolve workflows."""

    def __init__(
        self,
        system: SystemConfig,
        simulation: SimulationConfig,
        visualization: Optional[VisualizationConfig] = None,
        evaluation: Optional[EvaluationConfig] = None,
        output_dir: str = "./outputs",
        **kwargs,
    ):
        self.system = system
        self.simulation = simulation
        self.visualization = visualization
        self.evaluation = evaluation
        self.output_dir = Path(output_dir)

        # Store any additional configuration
        for key, value in kwargs.items():
            setattr(self, key, value)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        config_dict = dict(config_dict or {})
        system = SystemConfig(**config_dict.get("system", {}))

        sim_dict = dict(config_dict.get("simulation", {}))
        if isinstance(sim_dict.get("time"), dict):
            sim_dict["time"] = TimeConfig(**sim_dict["time"])
        simulation = SimulationConfig(**sim_dict)

        # Optional sections
        visualization = None
        if config_dict.get("visualization") is not None:
            visualization = VisualizationConfig(**config_dict["visualization"])

        evaluation = None
        if config_dict.get("evaluation") is not None:
            evaluation = EvaluationConfig(**config_dict["evaluation"])

        other_keys = {k: v for k, v in config_dict.items() if k not in SECTIONS}

        return cls(
            system=system,
            simulation=simulation,
            visualization=visualization,
            evaluation=evaluation,
            **other_keys,
        )

    @classmethod
    def from_hydra_config(cls, hydra_config: DictConfig) -> "Config":
        """Create Config from Hydra DictConfig."""
        return cls.from_dict(OmegaConf.to_container(hydra_config, resolve=True))

    def with_overrides(self, overrides: List[str]) -> "Config":
        """
        Return a new Config with dotlist overrides applied.

        Args:
            overrides: Entries such as ``"simulation.time.dt=0.001"``
        """
        if not overrides:
            return self
        merged = OmegaConf.merge(
            OmegaConf.create(self.to_dict()), OmegaConf.from_dotlist(list(overrides))
        )
        return Config.from_hydra_config(merged)

    def to_dict(self) -> Dict[str, Any]:
        """Convert Config to dictionary."""
        result = {}

        if self.system:
            result["system"] = self.system.to_dict()
        if self.simulation:
            result["simulation"] = self.simulation.to_dict()
        if self.visualization:
            result["visualization"] = self.visualization.to_dict()
        if self.evaluation:
            result["evaluation"] = self.evaluation.to_dict()

        for key, value in self.__dict__.items():
            if key not in SECTIONS:
                if isinstance(value, Path):
                    result[key] = str(value)
                else:
                    result[key] = value

        return result


def load_config(config_path: Union[str, Path]) -> Config:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        config_dict = yaml.safe_load(f)

    return Config.from_dict(config_dict or {})


def save_config(config: Config, save_path: Union[str, Path]) -> None:
    """Save configuration to YAML file."""
    save_path = Path(save_path)
    save_path.parent.mkdir(parents=True, exist_ok=True)

    with open(save_path, "w") as f:
        yaml.dump(config.to_dict(), f, default_flow_style=False, indent=2)
