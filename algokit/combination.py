from typing import Callable, Iterable, List, Optional, TypeVar

from algokit.errors import PreconditionError
from algokit.validators import materialize

T = TypeVar("T")


def _default_equals(a, b) -> bool:
    return a == b


def combinations(
    items: Iterable[T],
    k: int,
    equals: Optional[Callable[[T, T], bool]] = None,
) -> List[List[T]]:
    """
    Enumerate every ordered selection of ``k`` distinct items.

    Each item in turn becomes the head of a selection, followed by every
    (k - 1)-selection of the items not equal to it. Order matters, so
    ``[a, b]`` and ``[b, a]`` are both produced. Items equal to the head
    (under ``equals``, or ``==`` when omitted) are left out of its tail, so a
    value never repeats inside one selection.

    ``k == 0`` gives no selections at all and ``k == 1`` gives one singleton
    per item.

    Raises:
        PreconditionError: If ``k`` is negative.
    """
    if k < 0:
        raise PreconditionError(f"k must be >= 0, got {k}")
    same = equals or _default_equals
    return _combine(materialize(items), k, same)


def _combine(
    items: List[T], k: int, same: Callable[[T, T], bool]
) -> List[List[T]]:
    if k == 0:
        return []
    if k == 1:
        return [[item] for item in items]

    result: List[List[T]] = []
    for head in items:
        others = [item for item in items if not same(item, head)]
        for tail in _combine(others, k - 1, same):
            result.append([head] + tail)
    return result
