"""
Sorting Module
One sort, three ways to bind its comparison: subclass, strategy, generic function
"""

from . import parameterized
from .primitive import ascending, descending, is_ordered, sort_in_place
from .template_method import ComparisonSorter, AscendingSorter, DescendingSorter
from .strategy import (
    Comparator,
    AscendingComparator,
    DescendingComparator,
    FunctionComparator,
    StrategySorter,
)
from .demo import run_demonstrations, format_sequence

__all__ = [
    'parameterized',
    'ascending',
    'descending',
    'is_ordered',
    'sort_in_place',
    'ComparisonSorter',
    'AscendingSorter',
    'DescendingSorter',
    'Comparator',
    'AscendingComparator',
    'DescendingComparator',
    'FunctionComparator',
    'StrategySorter',
    'run_demonstrations',
    'format_sequence'
]
