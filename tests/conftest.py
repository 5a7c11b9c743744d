import matplotlib

matplotlib.use("Agg")

import pytest

from dp_tools.logging_config import reset_logging
from dp_tools.weights import WeightTable

EXAMPLE_GRID = [
    [1, 0, 0, 1, 0],
    [0, 0, 0, 0, 1],
    [0, 0, 0, 0, 0],
    [1, 0, 0, 0, 0],
    [0, 0, 1, 0, 0],
]


@pytest.fixture(autouse=True)
def clean_logging():
    yield
    reset_logging()


@pytest.fixture
def example_grid():
    return [row[:] for row in EXAMPLE_GRID]


@pytest.fixture
def uniform():
    return WeightTable.uniform()


@pytest.fixture
def proportional():
    return WeightTable.proportional(1.0, 10.0)
