"""Particle Swarm Optimization for two-dimensional objective functions.

The optimizer keeps a fixed-size swarm and runs a fixed number of
iterations. Each iteration first scores every particle and updates the
personal and global bests, then moves every particle toward the global
best and clips it back into the search box.

Both the cognitive and the social pull terms of the velocity update use
the global best; there is no separate personal-best attraction.
"""

import time
import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import numpy as np

from ..core.config import PSOConfig
from ..core.exceptions import OptimizationError
from ..core.types import Bounds, Point
from .fitness import FitnessPredicate, get_fitness, less_than
from .kernels import move_particles
from .swarm import Swarm

logger = logging.getLogger(__name__)

Objective = Callable[[float, float], float]
BoundsLike = Union[Bounds, Sequence[Sequence[float]]]


class ParticleSwarmOptimizer:
    """Particle Swarm Optimizer over an axis-aligned box.

    The random source is created once, here, and never reseeded. Pass an
    explicit ``numpy.random.Generator`` to control the stream; otherwise
    one is seeded from ``config.seed`` or, when that is ``None``, from the
    current time.
    """

    def __init__(self, config: Optional[PSOConfig] = None, rng: Optional[np.random.Generator] = None):
        self.config = config or PSOConfig()

        if rng is None:
            self.seed = self.config.seed if self.config.seed is not None else time.time_ns()
            rng = np.random.default_rng(self.seed)
        else:
            self.seed = None
        self.rng = rng

        self.swarm = Swarm(self.config.swarm_size)
        self.bounds: Optional[Bounds] = None
        self._reset_state()

        logger.info(
            f"Particle Swarm Optimizer initialized with {self.config.swarm_size} particles "
            f"(w={self.config.inertia_weight}, cp={self.config.cognitive_weight}, "
            f"cg={self.config.social_weight})"
        )

    def _reset_state(self):
        self.iteration = 0
        self.evaluations = 0
        self.global_best_set = False
        self.global_best_position = Point(float('nan'), float('nan'))
        self.global_best_value = float('nan')
        self.cost_history: List[float] = []

    def run(
        self,
        objective: Objective,
        bounds: BoundsLike,
        is_better: Union[str, FitnessPredicate],
        max_iterations: int
    ) -> Point:
        """Run exactly ``max_iterations`` iterations and return the best point.

        With ``max_iterations == 0`` the initial sample is still scored once
        so that a best point exists.
        """
        self._execute(objective, bounds, is_better, max_iterations)
        return self.global_best_position

    def optimize(
        self,
        objective: Objective,
        bounds: BoundsLike,
        is_better: Union[str, FitnessPredicate] = less_than,
        max_iterations: Optional[int] = None
    ) -> Dict[str, Any]:
        """Run the optimizer and return a result summary."""
        if max_iterations is None:
            max_iterations = self.config.max_iterations

        start_time = time.time()
        self._execute(objective, bounds, is_better, max_iterations)
        solve_time = time.time() - start_time

        return {
            'success': bool(np.isfinite(self.global_best_value)),
            'x': np.array(self.global_best_position),
            'fun': self.global_best_value,
            'nit': self.iteration,
            'nfev': self.evaluations,
            'message': 'PSO optimization completed',
            'cost_history': list(self.cost_history),
            'solve_time': solve_time
        }

    def _execute(self, objective, bounds, is_better, max_iterations):
        bounds, is_better = self._validate(objective, bounds, is_better, max_iterations)

        self.bounds = bounds
        self._reset_state()
        self.swarm.initialize(bounds, self.rng)

        if max_iterations == 0:
            self._evaluate(objective, is_better)
        else:
            for iteration in range(max_iterations):
                self._evaluate(objective, is_better)
                self._move()
                self.iteration = iteration + 1

                if self.config.verbose and self.iteration % self.config.log_interval == 0:
                    logger.info(
                        f"PSO Iteration {self.iteration}: Best value = {self.global_best_value:.6g} "
                        f"at ({self.global_best_position.x:.6g}, {self.global_best_position.y:.6g})"
                    )

        logger.info(
            f"PSO optimization completed after {self.iteration} iterations "
            f"({self.evaluations} evaluations): best value = {self.global_best_value:.6g}"
        )

    def _validate(self, objective, bounds, is_better, max_iterations):
        if not callable(objective):
            raise OptimizationError(
                "Objective function must be callable",
                error_type="invalid_objective",
                details={"objective": repr(objective)}
            )

        try:
            bounds = Bounds.from_sequence(bounds)
        except (TypeError, ValueError) as e:
            raise OptimizationError(
                f"Invalid bounds: {e}",
                error_type="invalid_bounds",
                details={"bounds": repr(bounds)}
            ) from e

        is_better = get_fitness(is_better)

        if isinstance(max_iterations, bool) or not isinstance(max_iterations, (int, np.integer)):
            raise OptimizationError(
                "max_iterations must be an integer",
                error_type="invalid_iterations",
                details={"max_iterations": repr(max_iterations)}
            )
        if max_iterations < 0:
            raise OptimizationError(
                "max_iterations must not be negative",
                error_type="invalid_iterations",
                details={"max_iterations": int(max_iterations)}
            )

        return bounds, is_better

    def _evaluate(self, objective: Objective, is_better: FitnessPredicate) -> None:
        """Score every particle and update personal and global bests.

        A best is only replaced by a strictly better value; the first
        evaluation of each particle and the first global update are taken
        unconditionally.
        """
        swarm = self.swarm

        for i in range(swarm.size):
            x = float(swarm.position[i, 0])
            y = float(swarm.position[i, 1])
            value = float(objective(x, y))
            self.evaluations += 1

            if swarm.evaluated[i] and not is_better(value, float(swarm.best_value[i])):
                continue

            swarm.update_personal_best(i, value)

            # A global best is always at least as good as any personal best,
            # so it can only change when a personal best does.
            if not self.global_best_set or is_better(value, self.global_best_value):
                self.global_best_set = True
                self.global_best_value = value
                self.global_best_position = Point(x, y)

        self.cost_history.append(self.global_best_value)

    def _move(self) -> None:
        swarm = self.swarm
        bounds = self.bounds
        draws = self.rng.random(out=swarm.draws)

        move_particles(
            swarm.position,
            swarm.velocity,
            draws,
            self.global_best_position.x,
            self.global_best_position.y,
            self.config.inertia_weight,
            self.config.cognitive_weight,
            self.config.social_weight,
            bounds.x.min,
            bounds.x.max,
            bounds.y.min,
            bounds.y.max
        )

    def get_statistics(self) -> Dict[str, Any]:
        """Get optimizer statistics for the last run."""
        return {
            "iterations": self.iteration,
            "evaluations": self.evaluations,
            "best_value": self.global_best_value,
            "best_position": tuple(self.global_best_position),
            "seed": self.seed,
            "swarm": self.swarm.get_statistics()
        }
