"""
Typed request models for JSON documents read by the CLI.

A hull request is either a bare list of points or an object with a
``points`` key. Each point is an ``[x, y]`` pair or an ``{"x", "y"}`` object.
"""

from __future__ import annotations

from math import isfinite
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from algokit.types import Position


class PointModel(BaseModel):
    """A single 2D point as it appears in a JSON document."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    @model_validator(mode="before")
    @classmethod
    def accept_pairs(cls, data: Any) -> Any:
        """Turn an ``[x, y]`` pair into the ``{"x", "y"}`` shape."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(
                    f"a point needs exactly 2 coordinates, got {len(data)}"
                )
            return {"x": data[0], "y": data[1]}
        return data

    @field_validator("x", "y")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not isfinite(v):
            raise ValueError(f"coordinate must be finite, got {v}")
        return v

    def to_position(self) -> Position:
        return Position(self.x, self.y)


class HullRequest(BaseModel):
    """Points to compute a convex hull over."""

    points: list[PointModel]

    @model_validator(mode="before")
    @classmethod
    def accept_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"points": data}
        return data

    def positions(self) -> list[Position]:
        return [point.to_position() for point in self.points]
