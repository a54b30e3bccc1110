import pytest

from forestfilter.filtering.hierarchy_filter import reset_filter_metrics
from forestfilter.models.forest import ArrayForest


@pytest.fixture(autouse=True)
def clear_filter_metrics():
    """Clear the module-level filter metrics between tests."""
    reset_filter_metrics()
    yield
    reset_filter_metrics()


@pytest.fixture
def sample_forest() -> ArrayForest:
    """
    Three trees in DFS order.

    1 - 2 - 3 - 4
      - 5
    6 - 7
    8 - 9
      - 10 - 11
    """
    return ArrayForest.from_sequences(
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
        [0, 1, 2, 3, 1, 0, 1, 0, 1, 1, 2],
    )
