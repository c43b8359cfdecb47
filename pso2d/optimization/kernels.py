"""Compiled swarm movement kernel."""

import numpy as np
from numba import jit


@jit(nopython=True)
def move_particles(
    position: np.ndarray,
    velocity: np.ndarray,
    draws: np.ndarray,
    best_x: float,
    best_y: float,
    inertia: float,
    cognitive: float,
    social: float,
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
) -> None:
    """Apply one velocity and position update to every particle in place.

    ``draws`` holds one ``(r_p, r_g)`` pair of uniform [0, 1) samples per
    particle. Both pull terms point at the global best. Positions are
    clipped per axis to the bounds; velocity is left unclamped.
    """
    for i in range(position.shape[0]):
        rp = draws[i, 0] * cognitive
        rg = draws[i, 1] * social

        diff_x = best_x - position[i, 0]
        diff_y = best_y - position[i, 1]
        velocity[i, 0] = inertia * velocity[i, 0] + rp * diff_x + rg * diff_x
        velocity[i, 1] = inertia * velocity[i, 1] + rp * diff_y + rg * diff_y

        new_x = position[i, 0] + velocity[i, 0]
        new_y = position[i, 1] + velocity[i, 1]

        if new_x < x_min:
            new_x = x_min
        elif new_x > x_max:
            new_x = x_max

        if new_y < y_min:
            new_y = y_min
        elif new_y > y_max:
            new_y = y_max

        position[i, 0] = new_x
        position[i, 1] = new_y
