"""
Sorting Demonstration Module
Runs the same sort through each of the three comparison bindings
"""

from typing import Iterable, List, Sequence, Tuple
from . import parameterized
from .strategy import DescendingComparator, StrategySorter
from .template_method import AscendingSorter
import logging

logger = logging.getLogger(__name__)


def demonstrate_template_method(data: Sequence[int]) -> List[int]:
    """
    Sort a fresh copy of the data with the ascending subclass sorter

    Args:
        data: Initial sequence (left untouched)

    Returns:
        List[int]: Sorted copy
    """
    values = list(data)
    AscendingSorter().sort(values)
    return values


def demonstrate_strategy(data: Sequence[int]) -> List[int]:
    """
    Sort a fresh copy of the data with a descending comparator strategy

    Args:
        data: Initial sequence (left untouched)

    Returns:
        List[int]: Sorted copy
    """
    values = list(data)
    StrategySorter().sort(values, DescendingComparator())
    return values


def demonstrate_parameterized(data: Sequence[int]) -> List[int]:
    """
    Sort a fresh copy of the data with the generic function and a lambda

    Args:
        data: Initial sequence (left untouched)

    Returns:
        List[int]: Sorted copy
    """
    values = list(data)
    parameterized.sort(values, lambda a, b: a < b)
    return values


DEMONSTRATIONS = [
    ("template_method", demonstrate_template_method),
    ("strategy", demonstrate_strategy),
    ("parameterized", demonstrate_parameterized),
]


def run_demonstrations(data: Sequence[int]) -> List[Tuple[str, List[int]]]:
    """
    Run every demonstration on its own copy of the data

    Args:
        data: Initial sequence shared by all demonstrations

    Returns:
        List[Tuple[str, List[int]]]: (demonstration name, sorted result) in run order
    """
    results = []
    for name, demonstrate in DEMONSTRATIONS:
        result = demonstrate(data)
        logger.info(f"{name}: {result}")
        results.append((name, result))
    return results


def format_sequence(sequence: Iterable[int]) -> str:
    """Format integers as a space-separated line"""
    return " ".join(str(n) for n in sequence)
