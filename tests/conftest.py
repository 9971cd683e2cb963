"""Shared pytest fixtures used across the test suite."""

import random
from typing import Iterable

import pytest

from opponent_engine import DEFAULT_CATALOG, PersonaCatalog


class FixedRandom(random.Random):
    """A Random whose ``random()`` replays a fixed script of values.

    ``choice`` still works (it is driven by ``getrandbits``), so only the
    float draws are scripted.
    """

    def __init__(self, values: Iterable[float], seed: int = 0) -> None:
        super().__init__(seed)
        self._values = list(values)
        self._index = 0

    def random(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value

    # Defining getrandbits keeps choice() on the bit generator instead of random()
    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def catalog() -> PersonaCatalog:
    return DEFAULT_CATALOG


@pytest.fixture
def fixed_random():
    return FixedRandom
