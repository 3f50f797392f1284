"""
Bit encoding helpers for ParityGrid.

Handles conversion between caller sequences, strings and block arrays.
Batch helpers live in ParityGrid.encoding.batch.
"""

from ParityGrid.encoding.codec import to_bits, bits_to_string, string_to_bits
from ParityGrid.encoding.constants import (
    DEFAULT_DATA_BITS,
    DEFAULT_PARITY_BITS,
    DEFAULT_BLOCK_LENGTH,
    MIN_SIDE,
)

__all__ = [
    "to_bits",
    "bits_to_string",
    "string_to_bits",
    "DEFAULT_DATA_BITS",
    "DEFAULT_PARITY_BITS",
    "DEFAULT_BLOCK_LENGTH",
    "MIN_SIDE",
]
