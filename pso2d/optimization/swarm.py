"""Fixed-size particle swarm for two-dimensional search."""

import logging
from typing import Any, Dict, Iterator

import numpy as np

from ..core.types import Bounds, Particle, Point
from ..core.config import SWARM_SIZE
from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Swarm:
    """Particle state held as parallel arrays.

    All arrays are allocated once in the constructor and only ever written
    in place, so the swarm size is fixed for the lifetime of the object.

    Attributes:
        position: ``(size, 2)`` current coordinates.
        velocity: ``(size, 2)`` current velocities.
        best_position: ``(size, 2)`` personal best coordinates.
        best_value: ``(size,)`` personal best values, ``nan`` until evaluated.
        evaluated: ``(size,)`` whether each particle has been scored yet.
        draws: ``(size, 2)`` scratch buffer for the per-iteration random pulls.
    """

    def __init__(self, size: int = SWARM_SIZE):
        if size <= 0:
            raise ConfigurationError("Swarm size must be positive", details={"size": size})

        self._size = size
        self.position = np.zeros((size, 2))
        self.velocity = np.zeros((size, 2))
        self.best_position = np.zeros((size, 2))
        self.best_value = np.full(size, np.nan)
        self.evaluated = np.zeros(size, dtype=bool)
        self.draws = np.zeros((size, 2))

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def initialize(self, bounds: Bounds, rng: np.random.Generator) -> None:
        """Scatter the particles uniformly over the bounds.

        Velocities are drawn from [-1, 1] on each axis. Personal bests start
        at the initial positions and stay unscored until the first
        evaluation pass.

        Precondition: ``bounds`` is well formed (``min <= max`` per axis);
        :class:`~pso2d.core.types.Bounds` enforces this on construction.
        """
        self.velocity[:] = rng.uniform(-1.0, 1.0, size=(self._size, 2))
        self.position[:, 0] = rng.uniform(bounds.x.min, bounds.x.max, size=self._size)
        self.position[:, 1] = rng.uniform(bounds.y.min, bounds.y.max, size=self._size)

        # A zero-width interval must pin the coordinate exactly
        np.clip(self.position[:, 0], bounds.x.min, bounds.x.max, out=self.position[:, 0])
        np.clip(self.position[:, 1], bounds.y.min, bounds.y.max, out=self.position[:, 1])

        self.best_position[:] = self.position
        self.best_value.fill(np.nan)
        self.evaluated.fill(False)

        logger.debug(f"Swarm of {self._size} particles initialized within {bounds.as_tuple()}")

    def update_personal_best(self, index: int, value: float) -> None:
        self.best_value[index] = value
        self.best_position[index] = self.position[index]
        self.evaluated[index] = True

    def within(self, bounds: Bounds) -> bool:
        """Check that every particle lies inside ``bounds``."""
        xs = self.position[:, 0]
        ys = self.position[:, 1]
        return bool(
            np.all((xs >= bounds.x.min) & (xs <= bounds.x.max))
            and np.all((ys >= bounds.y.min) & (ys <= bounds.y.max))
        )

    def particle(self, index: int) -> Particle:
        """Return a snapshot of one particle."""
        return Particle(
            position=Point(float(self.position[index, 0]), float(self.position[index, 1])),
            velocity=Point(float(self.velocity[index, 0]), float(self.velocity[index, 1])),
            best_position=Point(
                float(self.best_position[index, 0]), float(self.best_position[index, 1])
            ),
            best_value=float(self.best_value[index]),
            evaluated=bool(self.evaluated[index])
        )

    def __iter__(self) -> Iterator[Particle]:
        for index in range(self._size):
            yield self.particle(index)

    def get_statistics(self) -> Dict[str, Any]:
        """Summary of the current swarm spread."""
        return {
            "size": self._size,
            "evaluated": int(self.evaluated.sum()),
            "centroid": self.position.mean(axis=0).tolist(),
            "spread": self.position.std(axis=0).tolist(),
            "mean_speed": float(np.linalg.norm(self.velocity, axis=1).mean()),
        }
