"""Unit tests for min-by-key helpers and anchor selection."""

import pytest

from algokit.errors import EmptyInputError
from algokit.selection import min_item, min_items, select_anchor
from algokit.types import as_position


@pytest.mark.unit
def test_min_items_returns_every_tie_in_order():
    items = [("a", 3), ("b", 1), ("c", 2), ("d", 1)]
    assert min_items(items, key=lambda item: item[1]) == [("b", 1), ("d", 1)]


@pytest.mark.unit
def test_min_items_of_nothing_is_empty():
    assert min_items([], key=lambda item: item) == []


@pytest.mark.unit
def test_min_item_takes_first_tie():
    items = [("a", 3), ("b", 1), ("c", 1)]
    assert min_item(items, key=lambda item: item[1]) == ("b", 1)


@pytest.mark.unit
def test_min_item_of_nothing_fails():
    with pytest.raises(EmptyInputError):
        min_item([], key=lambda item: item)


@pytest.mark.unit
def test_anchor_is_lowest_point():
    pts = [(3, 5), (1, 2), (4, 1), (0, 7)]
    assert select_anchor(pts, as_position) == (4, 1)


@pytest.mark.unit
def test_anchor_breaks_y_tie_by_lowest_x():
    pts = [(3, 0), (1, 0), (2, 0), (0, 5)]
    assert select_anchor(pts, as_position) == (1, 0)


@pytest.mark.unit
def test_coincident_anchors_resolve_to_first_in_input_order():
    first = [1, 0]
    second = [1, 0]
    anchor = select_anchor([(2, 2), first, second], as_position)
    assert anchor is first


@pytest.mark.unit
def test_anchor_of_nothing_fails():
    with pytest.raises(EmptyInputError):
        select_anchor([], as_position)
