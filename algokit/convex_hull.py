"""
Convex hull construction by polar-angle sorting and a backtracking scan.

The hull is computed over arbitrary caller items through a projection that
maps each item to its Position. The result is made of the caller's own
objects, in counter-clockwise order starting at the anchor (the lowest, then
leftmost, point).
"""

import logging
from typing import Callable, Iterable, List, Tuple, TypeVar

from algokit.geometry import distance, is_ccw, polar_angle
from algokit.selection import select_anchor
from algokit.types import Position, PositionLike, as_position
from algokit.validators import (
    materialize,
    validate_projection,
    validate_tolerance,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_Projected = Tuple[T, Position]


def _position_of(entry: _Projected) -> Position:
    return entry[1]


def _project_all(
    items: List[T], project: Callable[[T], PositionLike]
) -> List[_Projected]:
    """Pair every item with its position, projecting each item exactly once."""
    return [(item, as_position(project(item))) for item in items]


def polar_sort(
    items: Iterable[T], project: Callable[[T], PositionLike]
) -> List[T]:
    """
    Order items counter-clockwise around the anchor.

    The key is (polar angle from the anchor, distance from the anchor), so
    points sharing a ray come out nearest first. The anchor itself has angle
    0 and distance 0 and always sorts first. Python's sort is stable, so items
    at the same position keep their input order.

    Raises:
        EmptyInputError: If ``items`` is empty.
        InvalidProjectionError: If ``project`` is not callable.
    """
    validate_projection(project)
    entries = _project_all(materialize(items), project)
    return [item for item, _ in _polar_sort_entries(entries)]


def _polar_sort_entries(entries: List[_Projected]) -> List[_Projected]:
    anchor = _position_of(select_anchor(entries, _position_of))
    return sorted(
        entries,
        key=lambda entry: (
            polar_angle(anchor, entry[1]),
            distance(anchor, entry[1]),
        ),
    )


def _scan(ordered: List[_Projected], tolerance: float) -> List[_Projected]:
    """
    Walk the polar-sorted entries and keep the hull boundary on a stack.

    A candidate that does not make a left turn with the top two stack entries
    pops the top and is re-examined against the shrunk stack without
    advancing. When only the two starting entries remain, the candidate lies
    on the starting ray beyond the second entry and takes its place.
    """
    stack = [ordered[0], ordered[1]]
    idx = 2
    while idx < len(ordered):
        candidate = ordered[idx]
        if is_ccw(stack[-2][1], stack[-1][1], candidate[1], tolerance):
            stack.append(candidate)
            idx += 1
        elif len(stack) > 2:
            stack.pop()
        else:
            stack[-1] = candidate
            idx += 1
    return stack


def convex_hull_by(
    items: Iterable[T],
    project: Callable[[T], PositionLike],
    *,
    tolerance: float = 0.0,
) -> List[T]:
    """
    Compute the convex hull of arbitrary items carrying a 2D position.

    Args:
        items: The items to enclose. Any iterable; it is read once.
        project: Pure function mapping an item to its Position (or to an
            (x, y) pair / {"x", "y"} mapping).
        tolerance: Cross products at or below this value count as "not a
            left turn". The default of 0.0 keeps only strictly convex
            vertices.

    Returns:
        The subset of ``items`` on the hull boundary, counter-clockwise from
        the anchor. Inputs of two or fewer items are returned unchanged, in
        their original order.

    Raises:
        InvalidProjectionError: If ``project`` is None or not callable.
        InvalidPositionError: If ``project`` returns something that is not a
            finite position.
        PreconditionError: If ``tolerance`` is negative.
    """
    validate_projection(project)
    tolerance = validate_tolerance(tolerance)
    items = materialize(items)
    if len(items) <= 2:
        return items

    entries = _project_all(items, project)
    ordered = _polar_sort_entries(entries)
    hull = _scan(ordered, tolerance)
    logger.debug(
        "Convex hull kept %d of %d points", len(hull), len(entries)
    )
    return [item for item, _ in hull]


def convex_hull(
    points: Iterable[PositionLike], *, tolerance: float = 0.0
) -> List[PositionLike]:
    """
    Compute the convex hull of a set of 2D points (in CCW order).

    Each point may be a Position, an (x, y) pair or an {"x", "y"} mapping.
    The returned list holds the caller's original point objects.

    Example:
        ```python
        >>> convex_hull([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)])
        [(0, 0), (4, 0), (4, 4), (0, 4)]
        ```
    """
    return convex_hull_by(points, as_position, tolerance=tolerance)
