"""Unit tests for the Position value object and position coercion."""

import math

import pytest

from algokit.errors import InvalidPositionError, PreconditionError
from algokit.types import Position, as_position


class TestPosition:
    """Value semantics and validation."""

    @pytest.mark.unit
    def test_ints_become_floats(self):
        p = Position(1, 2)
        assert isinstance(p.x, float)
        assert isinstance(p.y, float)
        assert p.as_tuple() == (1.0, 2.0)

    @pytest.mark.unit
    def test_value_equality_and_hashing(self):
        assert Position(1, 2) == Position(1.0, 2.0)
        assert len({Position(1, 2), Position(1.0, 2.0)}) == 1

    @pytest.mark.unit
    def test_is_immutable(self):
        p = Position(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5

    @pytest.mark.unit
    def test_subtraction_gives_vector(self):
        assert Position(4, 6) - Position(1, 2) == (3.0, 4.0)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "x, y", [("1", 2), (1, None), (True, 0), (math.nan, 0), (0, math.inf)]
    )
    def test_rejects_invalid_coordinates(self, x, y):
        with pytest.raises(InvalidPositionError):
            Position(x, y)

    @pytest.mark.unit
    def test_invalid_position_is_a_value_error(self):
        with pytest.raises(ValueError):
            Position("a", 0)
        assert issubclass(InvalidPositionError, PreconditionError)

    @pytest.mark.unit
    def test_dict_round_trip(self):
        p = Position(1.5, -2)
        assert p.to_dict() == {"x": 1.5, "y": -2.0}
        assert Position.from_dict(p.to_dict()) == p

    @pytest.mark.unit
    def test_from_dict_requires_both_keys(self):
        with pytest.raises(InvalidPositionError, match="'y'"):
            Position.from_dict({"x": 1})


class TestAsPosition:
    """Reading positions out of caller values."""

    @pytest.mark.unit
    def test_position_passes_through(self):
        p = Position(1, 2)
        assert as_position(p) is p

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [(1, 2), [1, 2], {"x": 1, "y": 2}])
    def test_accepted_shapes(self, value):
        assert as_position(value) == Position(1, 2)

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [None, 5, "12", (1, 2, 3), (1,)])
    def test_rejected_shapes(self, value):
        with pytest.raises(InvalidPositionError):
            as_position(value)
