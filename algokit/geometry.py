from math import atan2, hypot
from typing import List, Sequence

from algokit.errors import EmptyInputError
from algokit.types import Position


def cross_product(p1: Position, p2: Position, p3: Position) -> float:
    """
    Twice the signed area of the triangle (p1, p2, p3).

    Positive when the three points turn left (counter-clockwise), negative when
    they turn right and zero when they are collinear.
    """
    return (p1.x * p2.y + p2.x * p3.y + p3.x * p1.y) - (
        p2.x * p1.y + p3.x * p2.y + p1.x * p3.y
    )


def is_ccw(
    p1: Position, p2: Position, p3: Position, tolerance: float = 0.0
) -> bool:
    """
    Return True iff p1 -> p2 -> p3 is a strict left turn.

    Collinear and clockwise triples both return False. ``tolerance`` widens the
    collinear band: the turn only counts as left when the cross product exceeds
    it.
    """
    return cross_product(p1, p2, p3) > tolerance


def distance(p1: Position, p2: Position) -> float:
    """Euclidean distance between two positions."""
    return hypot(p1.x - p2.x, p1.y - p2.y)


def polar_angle(origin: Position, target: Position) -> float:
    """
    Angle of the vector origin -> target in radians, in [-pi, pi].

    Uses the two-argument arctangent so vertical vectors and all four
    quadrants are handled. The zero vector has angle 0.
    """
    dx, dy = target - origin
    return atan2(dy, dx)


def polygon_area(vertices: Sequence[Position]) -> float:
    """
    Signed area of a polygon using the shoelace formula.

    Positive for counter-clockwise vertex order, negative for clockwise and
    zero for fewer than three vertices.
    """
    n = len(vertices)
    if n < 3:
        return 0.0
    area_sum = 0.0
    for i in range(n):
        p0 = vertices[i]
        p1 = vertices[(i + 1) % n]
        area_sum += p0.x * p1.y - p1.x * p0.y
    return area_sum / 2.0


def hull_centroid(vertices: Sequence[Position]) -> Position:
    """
    Compute the centroid (geometric center) of a convex hull.

    The hull is expected in counter-clockwise order, as returned by
    ``convex_hull``:

      - A single point is its own centroid.
      - Two points give the midpoint of the segment connecting them.
      - Three or more points give the area-based centroid:

            cross_i = x_i * y_{i+1} - x_{i+1} * y_i
            A = 0.5 * sum(cross_i)
            C_x = (1 / (6A)) * sum((x_i + x_{i+1}) * cross_i)
            C_y = (1 / (6A)) * sum((y_i + y_{i+1}) * cross_i)

    If the area is nearly zero (a degenerate, very thin polygon), the mean of
    the vertices is returned instead.

    Raises:
        EmptyInputError: If ``vertices`` is empty.
    """
    n = len(vertices)
    if n == 0:
        raise EmptyInputError("cannot compute the centroid of an empty hull")
    if n == 1:
        return vertices[0]
    if n == 2:
        p0, p1 = vertices
        return Position((p0.x + p1.x) / 2.0, (p0.y + p1.y) / 2.0)

    area_sum = 0.0
    cx = 0.0
    cy = 0.0
    for i in range(n):
        p0 = vertices[i]
        p1 = vertices[(i + 1) % n]
        cross = p0.x * p1.y - p1.x * p0.y
        area_sum += cross
        cx += (p0.x + p1.x) * cross
        cy += (p0.y + p1.y) * cross

    area = area_sum / 2.0
    if abs(area) < 1e-14:
        return Position(
            sum(p.x for p in vertices) / n, sum(p.y for p in vertices) / n
        )
    return Position(cx / (6.0 * area), cy / (6.0 * area))


def _on_segment(a: Position, b: Position, p: Position, tolerance: float) -> bool:
    if abs(cross_product(a, b, p)) > tolerance:
        return False
    return (
        min(a.x, b.x) <= p.x <= max(a.x, b.x)
        and min(a.y, b.y) <= p.y <= max(a.y, b.y)
    )


def contains_point(
    hull: Sequence[Position], point: Position, tolerance: float = 0.0
) -> bool:
    """
    Return True if ``point`` is inside or on the boundary of ``hull``.

    ``hull`` must be a convex polygon in counter-clockwise order. One- and
    two-vertex hulls are treated as a point and a segment.
    """
    n = len(hull)
    if n == 0:
        return False
    if n == 1:
        return hull[0] == point
    if n == 2:
        return _on_segment(hull[0], hull[1], point, tolerance)
    edges: List[float] = [
        cross_product(hull[i], hull[(i + 1) % n], point) for i in range(n)
    ]
    return all(c >= -tolerance for c in edges)
