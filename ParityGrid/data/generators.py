"""
Random data bit generation for ParityGrid tests and trials.
"""

import numpy as np
from typing import List, Optional

from ParityGrid.encoding.constants import BIT_DTYPE

class MessageGenerator:
    """Generates uniformly random data bit sequences from an explicit RNG."""

    def __init__(
            self,
            message_length: int,
            rng: Optional[np.random.Generator] = None,
            seed: Optional[int] = None,
    ):
        if message_length < 0:
            raise ValueError("Message length must be non-negative.")
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        self.message_length = message_length
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self) -> np.ndarray:
        """Generates a single random bit sequence."""
        return self.rng.integers(0, 2, size=self.message_length, dtype=BIT_DTYPE)

    def generate_batch(self, batch_size: int) -> np.ndarray:
        """Generates a (batch_size, message_length) array of random bits."""
        return self.rng.integers(
            0, 2, size=(batch_size, self.message_length), dtype=BIT_DTYPE
        )


def create_random_message(length: int, rng: np.random.Generator) -> List[int]:
    """
    Creates a list of uniformly random bits.

    Args:
        length: Number of bits
        rng: Random source, e.g. numpy.random.default_rng(seed)

    Returns:
        List of 0/1 ints
    """
    return MessageGenerator(length, rng=rng).generate().tolist()
