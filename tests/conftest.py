"""Shared fixtures for the sorting tests"""
import numpy as np
import pytest

from src.sorting import ascending, descending


@pytest.fixture
def demo_data():
    return [5, 2, 9, 1]


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def random_lists(rng):
    """Random integer lists of varying length, duplicates and negatives included"""
    return [rng.integers(-50, 50, size=n).tolist() for n in (0, 1, 2, 3, 10, 57, 200)]


@pytest.fixture(params=[ascending, descending], ids=["ascending", "descending"])
def predicate(request):
    return request.param
