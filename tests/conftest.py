"""
Shared fixtures: a hand-driven clock and a scripted random source.
"""
import pytest

from settings import GameConfig
from state import RoundContext


class FakeClock:
    def __init__(self, t: float = 0.0):
        self.t = t

    def __call__(self) -> float:
        return self.t


class StubRandom:
    """random.Random stand-in returning scripted values, then `default` forever."""

    def __init__(self, values=(), default: float = 0.99):
        self.values = list(values)
        self.default = default

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return self.default


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def ctx(config):
    return RoundContext.new(config, 0)


@pytest.fixture
def fake_clock():
    return FakeClock()
