"""
Sort Primitive Module
Comparison-based in-place sort driven by a boolean ordering predicate
"""

from functools import cmp_to_key
from typing import Callable, MutableSequence, Sequence
import logging

logger = logging.getLogger(__name__)

# precedes(a, b) is True when a must come before b in the final order.
# It must be a strict weak ordering; this is not checked.
Predicate = Callable[[int, int], bool]


def ascending(a: int, b: int) -> bool:
    return a < b


def descending(a: int, b: int) -> bool:
    return a > b


def _three_way(precedes: Predicate):
    def compare(a, b) -> int:
        if precedes(a, b):
            return -1
        if precedes(b, a):
            return 1
        return 0
    return compare


def sort_in_place(sequence: MutableSequence[int], precedes: Predicate) -> None:
    """
    Reorder a mutable sequence so that it is ordered per the predicate

    Works on lists and on 1-D numpy arrays (anything accepting slice
    assignment). Relative order of equivalent elements is unspecified.

    Args:
        sequence: Caller-owned sequence, mutated in place
        precedes: Strict weak ordering over the elements
    """
    if len(sequence) < 2:
        return

    sequence[:] = sorted(sequence, key=cmp_to_key(_three_way(precedes)))
    logger.debug(f"Sorted {len(sequence)} elements")


def is_ordered(sequence: Sequence[int], precedes: Predicate) -> bool:
    """
    Check that no adjacent pair is out of order

    Equal (equivalent) neighbours are accepted in either relative position.

    Args:
        sequence: Sequence to check
        precedes: Ordering predicate the sequence should satisfy

    Returns:
        bool: True if every adjacent pair (x, y) has not precedes(y, x)
    """
    return all(not precedes(y, x) for x, y in zip(sequence, sequence[1:]))
