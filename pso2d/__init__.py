"""
pso2d

Bounded particle swarm optimization for scalar functions of two variables,
with a fixed-size swarm, pluggable fitness predicates and a command line
front end for benchmark functions.
"""

__version__ = "1.0.0"

from .core.types import Point, Interval, Bounds, Particle
from .core.config import PSOConfig, Config, load_config, SWARM_SIZE
from .core.exceptions import OptimizationError, ConfigurationError
from .optimization import (
    ParticleSwarmOptimizer,
    Swarm,
    less_than,
    greater_than,
    get_fitness,
)
from .functions import FUNCTIONS, BenchmarkFunction, get_function

# CLI
from .cli import cli

__all__ = [
    # Engine
    "ParticleSwarmOptimizer",
    "Swarm",
    "less_than",
    "greater_than",
    "get_fitness",

    # Types
    "Point",
    "Interval",
    "Bounds",
    "Particle",

    # Configuration
    "PSOConfig",
    "Config",
    "load_config",
    "SWARM_SIZE",

    # Errors
    "OptimizationError",
    "ConfigurationError",

    # Benchmarks
    "FUNCTIONS",
    "BenchmarkFunction",
    "get_function",

    # CLI
    "cli",

    "__version__",
]
