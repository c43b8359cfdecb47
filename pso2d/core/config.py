"""
Configuration management for pso2d.
"""

import os
import yaml
import logging
from typing import Dict, Any, Optional, Union, List
from dataclasses import dataclass, field, asdict
from pathlib import Path

from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)

SWARM_SIZE = 20

COEFF_W = 0.50   # inertia, should stay within [0.4, 0.9]
COEFF_CP = 2.05  # cognitive
COEFF_CG = 2.05  # social, same or close to cognitive

INERTIA_RANGE = (0.4, 0.9)
MAX_COEFF_SPREAD = 0.5


@dataclass
class PSOConfig:
    """Configuration for the particle swarm optimizer."""
    swarm_size: int = SWARM_SIZE
    inertia_weight: float = COEFF_W
    cognitive_weight: float = COEFF_CP
    social_weight: float = COEFF_CG
    max_iterations: int = 1000
    seed: Optional[int] = None
    verbose: bool = False
    log_interval: int = 1000

    def __post_init__(self):
        self._validate()

    def _validate(self):
        if self.swarm_size <= 0:
            raise ConfigurationError(
                "swarm_size must be positive", details={"swarm_size": self.swarm_size}
            )

        if self.max_iterations < 0:
            raise ConfigurationError(
                "max_iterations must not be negative",
                details={"max_iterations": self.max_iterations}
            )

        if self.log_interval <= 0:
            raise ConfigurationError(
                "log_interval must be positive", details={"log_interval": self.log_interval}
            )

        for name in ("inertia_weight", "cognitive_weight", "social_weight"):
            if getattr(self, name) < 0:
                raise ConfigurationError(
                    f"{name} must not be negative", details={name: getattr(self, name)}
                )

        low, high = INERTIA_RANGE
        if not low <= self.inertia_weight <= high:
            logger.warning(
                f"Inertia weight {self.inertia_weight} is outside the recommended range [{low}, {high}]"
            )

        if abs(self.cognitive_weight - self.social_weight) > MAX_COEFF_SPREAD:
            logger.warning(
                f"Cognitive ({self.cognitive_weight}) and social ({self.social_weight}) "
                "weights should have the same or similar value"
            )


@dataclass
class Config:
    """Main configuration for pso2d runs."""

    pso: PSOConfig = field(default_factory=PSOConfig)

    # Default problem for the command line; bounds of None mean the
    # benchmark function's own domain
    function: str = "ackley"
    bounds: Optional[List[List[float]]] = None
    maximize: bool = False

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING"))

    def __post_init__(self):
        self._validate()

    def _validate(self):
        # Numeric levels from YAML are accepted and stored by name
        if isinstance(self.log_level, int) and not isinstance(self.log_level, bool):
            self.log_level = logging.getLevelName(self.log_level)

        if not isinstance(self.log_level, str) or not isinstance(
            logging.getLevelName(self.log_level.upper()), int
        ):
            raise ConfigurationError(
                f"Invalid log level: {self.log_level!r}", details={"log_level": self.log_level}
            )

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "Config":
        """Load configuration from YAML file."""
        config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found, using defaults")
            return cls()

        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse config file {config_path}: {e}",
                details={"path": str(config_path)}
            ) from e

        if not config_data:
            logger.warning("Empty config file, using defaults")
            return cls()

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Config file {config_path} must contain a mapping",
                details={"path": str(config_path)}
            )

        main_config = {k: v for k, v in config_data.items() if k != "pso"}

        try:
            pso_config = PSOConfig(**(config_data.get("pso") or {}))
            return cls(pso=pso_config, **main_config)
        except TypeError as e:
            raise ConfigurationError(
                f"Unknown configuration key in {config_path}: {e}",
                details={"path": str(config_path)}
            ) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    def to_file(self, config_path: Union[str, Path]):
        """Save configuration to YAML file."""
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2)

        logger.info(f"Configuration saved to {config_path}")

    def update_from_env(self):
        """Update configuration from environment variables."""
        env_mappings = {
            "PSO2D_SWARM_SIZE": ("pso.swarm_size", int),
            "PSO2D_INERTIA": ("pso.inertia_weight", float),
            "PSO2D_COGNITIVE": ("pso.cognitive_weight", float),
            "PSO2D_SOCIAL": ("pso.social_weight", float),
            "PSO2D_MAX_ITERATIONS": ("pso.max_iterations", int),
            "PSO2D_SEED": ("pso.seed", int),
            "PSO2D_FUNCTION": ("function", str),
            "PSO2D_MAXIMIZE": ("maximize", lambda x: x.lower() == "true"),
            "PSO2D_LOG_LEVEL": ("log_level", str),
        }

        for env_var, (attr_path, converter) in env_mappings.items():
            value = os.getenv(env_var)
            if value is None:
                continue

            try:
                value = converter(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value for {env_var}: {value!r}", details={"variable": env_var}
                ) from e

            if "." in attr_path:
                obj_name, attr_name = attr_path.split(".", 1)
                setattr(getattr(self, obj_name), attr_name, value)
            else:
                setattr(self, attr_path, value)

            logger.info(f"Updated {attr_path} from environment variable {env_var}")

        self.pso._validate()
        self._validate()


def load_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """
    Load configuration from file or environment.

    Args:
        config_path: Path to configuration file (optional)

    Returns:
        Loaded configuration object
    """
    if config_path:
        config = Config.from_file(config_path)
    else:
        possible_paths = [
            "pso2d.yaml",
            "config/pso2d.yaml",
            os.path.expanduser("~/.pso2d/config.yaml"),
        ]

        config = None
        for path in possible_paths:
            if os.path.exists(path):
                config = Config.from_file(path)
                break

        if config is None:
            config = Config()

    config.update_from_env()

    return config
