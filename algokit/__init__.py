"""
algokit - convex hulls over 2D points or arbitrary positioned items.

The hull is built by sorting points by polar angle around the lowest point
and scanning them with a backtracking stack. A few small standalone
algorithms ship alongside it: a KMP prefix table, an ordered k-combination
enumerator and a prime sieve.

Example:
    ```python
    from algokit import convex_hull, convex_hull_by

    convex_hull([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)])
    # [(0, 0), (4, 0), (4, 4), (0, 4)]

    convex_hull_by(stores, lambda store: (store.lng, store.lat))
    ```
"""

from algokit.combination import combinations
from algokit.config import AlgokitSettings, get_settings
from algokit.convex_hull import convex_hull, convex_hull_by, polar_sort
from algokit.errors import (
    AlgokitError,
    EmptyInputError,
    InvalidPositionError,
    InvalidProjectionError,
    PreconditionError,
)
from algokit.geometry import (
    contains_point,
    cross_product,
    distance,
    hull_centroid,
    is_ccw,
    polar_angle,
    polygon_area,
)
from algokit.prefix import prefix_table
from algokit.selection import min_item, min_items, select_anchor
from algokit.sieve import primes_up_to
from algokit.types import Position, as_position

__version__ = "0.1.0"

__all__ = [
    # Hull
    "convex_hull",
    "convex_hull_by",
    "polar_sort",
    "select_anchor",
    "min_item",
    "min_items",
    # Geometry
    "Position",
    "as_position",
    "cross_product",
    "is_ccw",
    "distance",
    "polar_angle",
    "polygon_area",
    "hull_centroid",
    "contains_point",
    # Standalone algorithms
    "prefix_table",
    "combinations",
    "primes_up_to",
    # Config
    "AlgokitSettings",
    "get_settings",
    # Errors
    "AlgokitError",
    "PreconditionError",
    "EmptyInputError",
    "InvalidProjectionError",
    "InvalidPositionError",
]
