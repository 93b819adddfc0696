"""
Parameterized Sorting Module
Generic free function over any comparison callable
"""

from typing import MutableSequence
from .primitive import Predicate, sort_in_place


def sort(sequence: MutableSequence[int], comparator: Predicate) -> None:
    """
    Sort the sequence in place with a caller-supplied comparison callable

    No sorter object and no comparator hierarchy: the callable is used
    as is. It must be a strict weak ordering.

    Args:
        sequence: Caller-owned sequence of integers
        comparator: Callable returning True when its first argument goes first
    """
    sort_in_place(sequence, comparator)
