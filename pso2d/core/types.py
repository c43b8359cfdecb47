"""Core data types for pso2d."""

import math
from dataclasses import dataclass
from typing import NamedTuple, Sequence, Tuple


class Point(NamedTuple):
    """A coordinate pair in the search plane."""
    x: float
    y: float


@dataclass(frozen=True)
class Interval:
    """Closed interval ``[min, max]`` on one axis.

    A zero-length interval is valid and pins the coordinate on that axis.
    """
    min: float
    max: float

    def __post_init__(self):
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise ValueError(f"Interval endpoints must be finite, got [{self.min}, {self.max}]")
        if self.min > self.max:
            raise ValueError(f"Interval minimum {self.min} is greater than maximum {self.max}")

    @property
    def width(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def clamp(self, value: float) -> float:
        if value < self.min:
            return self.min
        if value > self.max:
            return self.max
        return value


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned search box, constant for one optimization run.

    Defines both the sampling domain for swarm initialization and the
    clamping domain applied after every position update.
    """
    x: Interval
    y: Interval

    @classmethod
    def from_sequence(cls, bounds: Sequence[Sequence[float]]) -> "Bounds":
        """Build bounds from ``[[xmin, xmax], [ymin, ymax]]``."""
        if isinstance(bounds, Bounds):
            return bounds

        pairs = [tuple(pair) for pair in bounds]
        if len(pairs) != 2 or any(len(pair) != 2 for pair in pairs):
            raise ValueError(f"Bounds must be two [min, max] pairs, got {bounds!r}")

        (x_min, x_max), (y_min, y_max) = pairs
        return cls(
            x=Interval(float(x_min), float(x_max)),
            y=Interval(float(y_min), float(y_max))
        )

    def contains(self, point: Tuple[float, float]) -> bool:
        return self.x.contains(point[0]) and self.y.contains(point[1])

    def clamp(self, point: Tuple[float, float]) -> Point:
        return Point(self.x.clamp(point[0]), self.y.clamp(point[1]))

    def as_tuple(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return ((self.x.min, self.x.max), (self.y.min, self.y.max))


@dataclass
class Particle:
    """Snapshot of a single particle's state.

    The swarm keeps its state in parallel arrays; this view is only built
    on request for inspection.
    """
    position: Point
    velocity: Point
    best_position: Point
    best_value: float
    evaluated: bool = False
