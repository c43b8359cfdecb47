"""Core types, configuration and errors for pso2d."""

from .types import Point, Interval, Bounds, Particle
from .config import PSOConfig, Config, load_config, SWARM_SIZE
from .exceptions import OptimizationError, ConfigurationError

__all__ = [
    "Point",
    "Interval",
    "Bounds",
    "Particle",
    "PSOConfig",
    "Config",
    "load_config",
    "SWARM_SIZE",
    "OptimizationError",
    "ConfigurationError",
]
