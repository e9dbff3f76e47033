"""Min-by-key helpers and the hull anchor selection built on them."""

import logging
from typing import Callable, Iterable, List, TypeVar

from algokit.types import Position
from algokit.validators import materialize, validate_not_empty

logger = logging.getLogger(__name__)

T = TypeVar("T")


def min_items(items: Iterable[T], key: Callable[[T], float]) -> List[T]:
    """
    Return every item whose key equals the minimum key, in input order.

    An empty input gives an empty list.
    """
    items = materialize(items)
    if not items:
        return []
    keys = [key(item) for item in items]
    lowest = min(keys)
    return [item for item, k in zip(items, keys) if k == lowest]


def min_item(items: Iterable[T], key: Callable[[T], float]) -> T:
    """
    Return the first item with the minimum key.

    Raises:
        EmptyInputError: If ``items`` is empty.
    """
    items = materialize(items)
    validate_not_empty("items", items)
    return min_items(items, key)[0]


def select_anchor(items: Iterable[T], project: Callable[[T], Position]) -> T:
    """
    Pick the hull's starting item: lowest Y, then lowest X.

    Coincident candidates are indistinguishable, so the first one in input
    order wins.

    Raises:
        EmptyInputError: If ``items`` is empty.
    """
    items = materialize(items)
    validate_not_empty("items", items)
    lowest = min_items(items, lambda item: project(item).y)
    anchor = min_item(lowest, lambda item: project(item).x)
    logger.debug("Selected anchor at %s", project(anchor))
    return anchor
