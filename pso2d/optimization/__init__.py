"""
Particle swarm optimization engine for pso2d.
"""

from .fitness import less_than, greater_than, get_fitness, FITNESS_PREDICATES
from .swarm import Swarm
from .particle_swarm import ParticleSwarmOptimizer

__all__ = [
    "ParticleSwarmOptimizer",
    "Swarm",
    "less_than",
    "greater_than",
    "get_fitness",
    "FITNESS_PREDICATES",
]
