import matplotlib
import pytest

from antcolony.config import ACOParams

matplotlib.use("Agg")

# Corners of the unit square used by the scenario tests
SQUARE = [(0.1, 0.1), (0.9, 0.1), (0.9, 0.9), (0.1, 0.9)]


class FixedRng:
    """Stands in for numpy's Generator with a predetermined draw."""

    def __init__(self, value):
        self.value = value
        self.integers_calls = []

    def random(self):
        return self.value

    def integers(self, high):
        self.integers_calls.append(high)
        return high - 1


@pytest.fixture
def params():
    return ACOParams(alpha=1.0, beta=5.0, rho=0.5, q=100.0, tau0=0.1)


@pytest.fixture
def square():
    return list(SQUARE)
