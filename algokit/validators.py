"""
Boundary checks shared by the public entry points.

Every check here runs before any computation so callers get an immediate
failure instead of an empty or partial result.
"""

from math import isfinite
from typing import Any, Callable, Iterable, List, Sized, TypeVar

from algokit.errors import (
    EmptyInputError,
    InvalidProjectionError,
    PreconditionError,
)

T = TypeVar("T")


def format_type_error(name: str, value: Any, expected: type | tuple[type, ...]) -> str:
    """Return a standardized type error message."""
    if isinstance(expected, tuple):
        expected_names = ", ".join(t.__name__ for t in expected)
    else:
        expected_names = expected.__name__
    return f"{name} must be {expected_names}, got {type(value).__name__}"


def assert_type(
    name: str,
    value: Any,
    expected: type | tuple[type, ...],
    exc_type: type[Exception] = TypeError,
) -> None:
    """Raise an exception if ``value`` is not an instance of ``expected``."""
    if not isinstance(value, expected):
        raise exc_type(format_type_error(name, value, expected))


def validate_projection(project: Any) -> Callable:
    """Return ``project`` unchanged, or raise if it cannot be called."""
    if project is None:
        raise InvalidProjectionError("projection must not be None")
    if not callable(project):
        raise InvalidProjectionError(
            f"projection must be callable, got {type(project).__name__}"
        )
    return project


def validate_not_empty(name: str, items: Sized) -> None:
    """Raise EmptyInputError if ``items`` has no elements."""
    if len(items) == 0:
        raise EmptyInputError(f"{name} must contain at least one item")


def materialize(items: Iterable[T]) -> List[T]:
    """
    Take a single snapshot of ``items`` as a list.

    One-shot iterators are consumed exactly once, so every later pass sees the
    same elements.
    """
    if items is None:
        raise TypeError("items must be an iterable, got NoneType")
    return list(items)


def validate_tolerance(tolerance: float) -> float:
    """Return ``tolerance`` as a float, or raise if it is negative or not finite."""
    assert_type("tolerance", tolerance, (int, float), PreconditionError)
    if (
        isinstance(tolerance, bool)
        or not isfinite(tolerance)
        or tolerance < 0.0
    ):
        raise PreconditionError(
            f"tolerance must be a finite number >= 0, got {tolerance}"
        )
    return float(tolerance)
