# edit_distance.py
# Levenshtein distance with an early-exit ceiling, used by the PrefixTree for
# "did you mean" lookups. Only two rows of the DP table are ever alive.

from __future__ import annotations
from typing import List, Optional, Sequence

Row = List[int]


def first_row(target: str) -> Row:
    """Row 0 of the DP table: distance from the empty string to each prefix of target."""
    return list(range(len(target) + 1))


def edit_row(prev: Sequence[int], ch: str, target: str) -> Row:
    """
    Compute the next DP row for one more character `ch` of the source string.
    prev is the row for the source prefix without `ch`.
    """
    curr = [prev[0] + 1]
    for j in range(1, len(target) + 1):
        if ch == target[j - 1]:
            curr.append(prev[j - 1])
            continue
        ins = curr[j - 1]
        delete = prev[j]
        replace = prev[j - 1]
        val = ins if ins < delete else delete
        if replace < val:
            val = replace
        curr.append(val + 1)
    return curr


def bounded_edit_distance(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Levenshtein distance between a and b, giving up once the distance is
    known to exceed max_dist.

    Returns the true distance when it is <= max_dist, otherwise exactly
    max_dist + 1. With max_dist=None the full distance is computed.
    Symmetric in a and b. A negative max_dist admits nothing, so the
    answer is always max_dist + 1.
    """
    if max_dist is not None and max_dist < 0:
        return max_dist + 1

    if a == b:
        return 0

    # length gap alone is a lower bound on the distance
    if max_dist is not None and abs(len(a) - len(b)) > max_dist:
        return max_dist + 1

    # rows are indexed by position in the shorter string
    if len(a) < len(b):
        a, b = b, a

    prev = first_row(b)
    for ch in a:
        prev = edit_row(prev, ch, b)
        # row minimum never decreases on later rows
        if max_dist is not None and min(prev) > max_dist:
            return max_dist + 1

    if max_dist is not None and prev[-1] > max_dist:
        return max_dist + 1
    return prev[-1]


def levenshtein(a: str, b: str) -> int:
    """Plain unbounded edit distance."""
    return bounded_edit_distance(a, b)
