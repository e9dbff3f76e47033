"""Unit tests for the CLI request models."""

import math

import pytest
from pydantic import ValidationError

from algokit.models import HullRequest, PointModel
from algokit.types import Position


@pytest.mark.unit
def test_point_from_pair():
    assert PointModel.model_validate([1, 2]).to_position() == Position(1, 2)


@pytest.mark.unit
def test_point_from_object():
    point = PointModel.model_validate({"x": 1.5, "y": -2})
    assert point.to_position() == Position(1.5, -2)


@pytest.mark.unit
@pytest.mark.parametrize(
    "data",
    [[1, 2, 3], [1], {"x": 1}, {"x": "a", "y": 1}, {"x": math.inf, "y": 0}],
)
def test_invalid_points(data):
    with pytest.raises(ValidationError):
        PointModel.model_validate(data)


@pytest.mark.unit
def test_request_from_bare_list():
    request = HullRequest.model_validate([[0, 0], {"x": 1, "y": 1}])
    assert request.positions() == [Position(0, 0), Position(1, 1)]


@pytest.mark.unit
def test_request_from_object():
    request = HullRequest.model_validate({"points": [[0, 0], [2, 0]]})
    assert request.positions() == [Position(0, 0), Position(2, 0)]


@pytest.mark.unit
def test_request_requires_points():
    with pytest.raises(ValidationError):
        HullRequest.model_validate({"vertices": []})
