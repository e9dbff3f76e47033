"""
Immutable value objects for the algokit package.

Classes:
    Position: 2D coordinate (x, y)
"""

from dataclasses import dataclass
from math import isfinite
from typing import Any, Dict, Mapping, Sequence, Tuple, Union

from algokit.errors import InvalidPositionError


@dataclass(frozen=True)
class Position:
    """
    Immutable 2D coordinate.

    A Position has no identity beyond its value: two positions with the same
    coordinates compare and hash equal.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        """Validate and normalize to float."""
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidPositionError(
                    f"{name} must be numeric, got {type(value).__name__}"
                )
            if not isfinite(value):
                raise InvalidPositionError(f"{name} must be finite, got {value}")
        # Convert to float if int (frozen dataclass workaround)
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __sub__(self, other: "Position") -> Tuple[float, float]:
        """Vector from ``other`` to ``self`` as a (dx, dy) pair."""
        return (self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "Position":
        """
        Create from a mapping.

        Args:
            d: Mapping with 'x' and 'y' keys

        Returns:
            Position instance
        """
        for key in ("x", "y"):
            if key not in d:
                raise InvalidPositionError(f"point must contain the key '{key}'")
        return cls(x=d["x"], y=d["y"])


PositionLike = Union[Position, Sequence[float], Mapping[str, float]]


def as_position(value: PositionLike) -> Position:
    """
    Read a Position out of a position-like value.

    Accepts a Position, an (x, y) pair (tuple, list or any two-element
    sequence) or a mapping with 'x' and 'y' keys.

    Raises:
        InvalidPositionError: If the value has none of those shapes or its
            coordinates are not finite numbers.
    """
    if isinstance(value, Position):
        return value
    if isinstance(value, Mapping):
        return Position.from_dict(value)
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidPositionError(
            f"cannot read a position from {type(value).__name__}"
        )
    if len(value) != 2:
        raise InvalidPositionError(
            f"a position needs exactly 2 coordinates, got {len(value)}"
        )
    return Position(x=value[0], y=value[1])
