"""
Tests for seeded random data generation.
"""

import numpy as np
import pytest

from ParityGrid.data.generators import MessageGenerator, create_random_message


def test_same_seed_same_bits():
    a = MessageGenerator(11, seed=7).generate()
    b = MessageGenerator(11, seed=7).generate()
    assert np.array_equal(a, b)


def test_generated_values_are_bits():
    bits = MessageGenerator(1000, seed=1).generate()
    assert bits.shape == (1000,)
    assert set(np.unique(bits).tolist()) == {0, 1}


def test_generate_batch_shape():
    batch = MessageGenerator(11, seed=3).generate_batch(4)
    assert batch.shape == (4, 11)


def test_create_random_message_uses_given_rng():
    first = create_random_message(11, np.random.default_rng(42))
    second = create_random_message(11, np.random.default_rng(42))
    assert first == second
    assert len(first) == 11
    assert all(b in (0, 1) for b in first)


def test_rng_and_seed_are_exclusive():
    with pytest.raises(ValueError):
        MessageGenerator(11, rng=np.random.default_rng(), seed=1)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        MessageGenerator(-1)
