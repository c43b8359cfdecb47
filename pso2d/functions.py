"""Benchmark objective functions of two variables.

Each entry in :data:`FUNCTIONS` carries a sensible search box and the known
optimum value so the command line and the tests can run them by name.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from .core.exceptions import ConfigurationError


def ackley(x: float, y: float) -> float:
    """Ackley's function, global minimum 0 at (0, 0)."""
    return (
        -20.0 * math.exp(-0.2 * math.sqrt(0.5 * (x * x + y * y)))
        - math.exp(0.5 * (math.cos(2 * math.pi * x) + math.cos(2 * math.pi * y)))
        + math.e
        + 20.0
    )


def sphere(x: float, y: float) -> float:
    return x * x + y * y


def rosenbrock(x: float, y: float) -> float:
    """Rosenbrock's valley, global minimum 0 at (1, 1)."""
    return (1.0 - x) ** 2 + 100.0 * (y - x * x) ** 2


def rastrigin(x: float, y: float) -> float:
    return (
        20.0
        + x * x - 10.0 * math.cos(2 * math.pi * x)
        + y * y - 10.0 * math.cos(2 * math.pi * y)
    )


def himmelblau(x: float, y: float) -> float:
    """Himmelblau's function, four minima of value 0 (one at (3, 2))."""
    return (x * x + y - 11.0) ** 2 + (x + y * y - 7.0) ** 2


def booth(x: float, y: float) -> float:
    return (x + 2.0 * y - 7.0) ** 2 + (2.0 * x + y - 5.0) ** 2


@dataclass(frozen=True)
class BenchmarkFunction:
    """A named objective with its usual domain and optimum."""
    name: str
    function: Callable[[float, float], float]
    bounds: Tuple[Tuple[float, float], Tuple[float, float]]
    optimum_value: float
    description: str = ""

    def __call__(self, x: float, y: float) -> float:
        return self.function(x, y)


FUNCTIONS: Dict[str, BenchmarkFunction] = {
    f.name: f for f in [
        BenchmarkFunction("ackley", ackley, ((-50.0, 50.0), (-50.0, 50.0)), 0.0,
                          "Many local minima around a single global minimum at the origin"),
        BenchmarkFunction("sphere", sphere, ((-10.0, 10.0), (-10.0, 10.0)), 0.0,
                          "Convex bowl, minimum at the origin"),
        BenchmarkFunction("rosenbrock", rosenbrock, ((-5.0, 5.0), (-5.0, 5.0)), 0.0,
                          "Narrow curved valley, minimum at (1, 1)"),
        BenchmarkFunction("rastrigin", rastrigin, ((-5.12, 5.12), (-5.12, 5.12)), 0.0,
                          "Regular grid of local minima, minimum at the origin"),
        BenchmarkFunction("himmelblau", himmelblau, ((-5.0, 5.0), (-5.0, 5.0)), 0.0,
                          "Four identical minima"),
        BenchmarkFunction("booth", booth, ((-10.0, 10.0), (-10.0, 10.0)), 0.0,
                          "Plate-shaped, minimum at (1, 3)"),
    ]
}


def get_function(name: str) -> BenchmarkFunction:
    """Look up a benchmark function by name."""
    try:
        return FUNCTIONS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown benchmark function: {name!r}",
            details={"available": list_functions()}
        ) from None


def list_functions() -> List[str]:
    return sorted(FUNCTIONS)
