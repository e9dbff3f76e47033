from math import isqrt
from typing import List

from algokit.validators import assert_type, format_type_error


def primes_up_to(n: int) -> List[int]:
    """
    Return the primes <= ``n`` in ascending order (sieve of Eratosthenes).

    Raises:
        TypeError: If ``n`` is not an int.
    """
    if isinstance(n, bool):
        raise TypeError(format_type_error("n", n, int))
    assert_type("n", n, int)
    if n < 2:
        return []

    composite = [False] * (n + 1)
    for i in range(2, isqrt(n) + 1):
        if not composite[i]:
            for j in range(i * i, n + 1, i):
                composite[j] = True
    return [i for i in range(2, n + 1) if not composite[i]]
