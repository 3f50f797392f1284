import numpy as np
import pytest

from ParityGrid import Encoder


SCENARIO_INPUT = [1, 1, 0, 0, 1, 0, 1, 1, 0, 1, 1]

SCENARIO_BLOCK = [
    1, 1, 0, 1,
    0, 1, 0, 0,
    1, 1, 0, 1,
    1, 0, 1, 1,
]


@pytest.fixture
def encoder():
    """The reference 16-bit encoder: 12 data + 4 parity capacity."""
    return Encoder(12, 4)


@pytest.fixture
def large_encoder():
    """A 64-bit (8 x 8) encoder."""
    return Encoder(60, 4)


@pytest.fixture
def rng():
    """Seeded random source so failures are reproducible."""
    return np.random.default_rng(20240601)


@pytest.fixture
def scenario_input():
    return list(SCENARIO_INPUT)


@pytest.fixture
def scenario_block():
    return list(SCENARIO_BLOCK)
