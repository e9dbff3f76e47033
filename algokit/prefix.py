from typing import Hashable, List, Sequence


def prefix_table(pattern: Sequence[Hashable]) -> List[int]:
    """
    Build the KMP failure table for ``pattern``.

    Entry ``i`` is the length of the longest proper prefix of
    ``pattern[:i + 1]`` that is also a suffix of it. Works on strings and on
    any other indexable sequence of comparable symbols.
    """
    table = [0] * len(pattern)
    i = 1
    j = 0
    while i < len(pattern):
        if pattern[i] == pattern[j]:
            j += 1
            table[i] = j
            i += 1
        elif j > 0:
            # fall back to the next shorter border
            j = table[j - 1]
        else:
            i += 1
    return table
