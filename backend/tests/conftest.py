import pytest

from gdp_graph.services.transformer import transform

TWO_QUARTERS = [["2015-01-01", 50], ["2015-04-01", 75]]


@pytest.fixture
def two_quarters():
    return transform(TWO_QUARTERS)


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
