"""
Template Method Sorting Module
Sorters whose ordering decision is fixed by the concrete subclass
"""

from abc import ABC, abstractmethod
from typing import MutableSequence
from .primitive import sort_in_place
import logging

logger = logging.getLogger(__name__)


class ComparisonSorter(ABC):
    """
    Abstract base class for subclass-based sorters.

    The sort algorithm is fixed here; subclasses only decide how two
    elements compare.
    """

    def sort(self, sequence: MutableSequence[int]) -> None:
        """
        Sort the sequence in place using this sorter's comparison

        Args:
            sequence: Caller-owned sequence of integers
        """
        logger.debug(f"{self.__class__.__name__} sorting {len(sequence)} elements")
        sort_in_place(sequence, self.compare)

    @abstractmethod
    def compare(self, a: int, b: int) -> bool:
        """
        Decide whether a must precede b

        Must be a strict weak ordering over the element type.

        Args:
            a: First element
            b: Second element

        Returns:
            bool: True if a goes before b
        """
        pass


class AscendingSorter(ComparisonSorter):
    """
    Sort smallest first
    """

    def compare(self, a: int, b: int) -> bool:
        return a < b


class DescendingSorter(ComparisonSorter):
    """
    Sort largest first
    """

    def compare(self, a: int, b: int) -> bool:
        return a > b
