"""Fitness predicates deciding whether a candidate value beats the current best."""

from typing import Callable, Union

from ..core.exceptions import ConfigurationError

FitnessPredicate = Callable[[float, float], bool]


def less_than(a: float, b: float) -> bool:
    """Seek a minimum: true if ``a`` is strictly less than ``b``."""
    return a < b


def greater_than(a: float, b: float) -> bool:
    """Seek a maximum: true if ``a`` is strictly greater than ``b``."""
    return a > b


FITNESS_PREDICATES = {
    "less_than": less_than,
    "min": less_than,
    "minimize": less_than,
    "greater_than": greater_than,
    "max": greater_than,
    "maximize": greater_than,
}


def get_fitness(predicate: Union[str, FitnessPredicate]) -> FitnessPredicate:
    """Resolve a predicate given by name, or pass a callable through."""
    if callable(predicate):
        return predicate

    try:
        return FITNESS_PREDICATES[predicate]
    except (KeyError, TypeError):
        raise ConfigurationError(
            f"Unknown fitness predicate: {predicate!r}",
            details={"available": sorted(FITNESS_PREDICATES)}
        ) from None
