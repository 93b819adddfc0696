"""
Sorting Strategy Module
Comparison policies supplied to the sorter at call time
"""

from abc import ABC, abstractmethod
from typing import MutableSequence, Union
from .primitive import Predicate, sort_in_place
import logging

logger = logging.getLogger(__name__)


class Comparator(ABC):
    """
    Abstract base class for comparison strategies

    Instances are callable, so a comparator can be used anywhere a plain
    ordering predicate is expected.
    """

    @abstractmethod
    def compare(self, a: int, b: int) -> bool:
        """
        Decide whether a must precede b

        Args:
            a: First element
            b: Second element

        Returns:
            bool: True if a goes before b
        """
        pass

    def __call__(self, a: int, b: int) -> bool:
        return self.compare(a, b)


class AscendingComparator(Comparator):
    """
    Order smallest first
    """

    def compare(self, a: int, b: int) -> bool:
        return a < b


class DescendingComparator(Comparator):
    """
    Order largest first
    """

    def compare(self, a: int, b: int) -> bool:
        return a > b


class FunctionComparator(Comparator):
    """
    Wrap a plain two-argument predicate as a comparator
    """

    def __init__(self, func: Predicate):
        """
        Initialize function comparator

        Args:
            func: Predicate returning True when its first argument goes first
        """
        self.func = func
        logger.debug(f"Initialized FunctionComparator with {getattr(func, '__name__', func)!r}")

    def compare(self, a: int, b: int) -> bool:
        return bool(self.func(a, b))

    def __repr__(self):
        return f"FunctionComparator({getattr(self.func, '__name__', self.func)})"


class StrategySorter:
    """
    Sorter that takes its comparison strategy per call.

    Holds no state, so one instance can serve any number of policies.
    """

    def sort(self, sequence: MutableSequence[int],
             comparator: Union[Comparator, Predicate]) -> None:
        """
        Sort the sequence in place according to the given comparator

        The comparator must be a strict weak ordering; otherwise the result
        is some unspecified permutation of the input.

        Args:
            sequence: Caller-owned sequence of integers
            comparator: Comparator instance, or any predicate (wrapped in
                        FunctionComparator)
        """
        if not isinstance(comparator, Comparator):
            comparator = FunctionComparator(comparator)

        logger.debug(f"Sorting {len(sequence)} elements with {comparator.__class__.__name__}")
        sort_in_place(sequence, comparator.compare)
