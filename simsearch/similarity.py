"""String similarity measures used to score tokens against search patterns."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile
from typing import Optional


def jaro(a: Sequence, b: Sequence) -> float:
    """Return the Jaro similarity of two sequences, between 0.0 and 1.0.

    Two empty sequences are identical (1.0); one empty sequence matches nothing (0.0).
    """
    a_len, b_len = len(a), len(b)
    if a_len == 0 and b_len == 0:
        return 1.0
    if a_len == 0 or b_len == 0:
        return 0.0

    search_range = max(max(a_len, b_len) // 2 - 1, 0)
    a_flags = [False] * a_len
    b_flags = [False] * b_len
    matches = 0

    for i, a_elem in enumerate(a):
        low = max(i - search_range, 0)
        high = min(b_len, i + search_range + 1)
        for j in range(low, high):
            if not b_flags[j] and b[j] == a_elem:
                a_flags[i] = True
                b_flags[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    matched_a = (elem for elem, flag in zip(a, a_flags) if flag)
    matched_b = (elem for elem, flag in zip(b, b_flags) if flag)
    transpositions = sum(x != y for x, y in zip(matched_a, matched_b)) // 2

    return (
        matches / a_len
        + matches / b_len
        + (matches - transpositions) / matches
    ) / 3.0


def jaro_winkler(a: Sequence, b: Sequence) -> float:
    """Return the Jaro-Winkler similarity, boosting sequences with a common prefix."""
    distance = jaro(a, b)
    prefix_length = sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(a, b)))
    boosted = distance + 0.1 * prefix_length * (1.0 - distance)
    return min(boosted, 1.0)


def levenshtein_within(a: Sequence, b: Sequence, k: int) -> Optional[int]:
    """Return the Levenshtein distance of ``a`` and ``b`` if it is at most ``k``, else None."""
    if abs(len(a) - len(b)) > k:
        return None

    previous = list(range(len(b) + 1))
    for i, a_elem in enumerate(a, start=1):
        current = [i]
        for j, b_elem in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (a_elem != b_elem),
                )
            )
        if min(current) > k:
            return None
        previous = current

    distance = previous[-1]
    return distance if distance <= k else None