"""
Batch encoding and validation of many blocks at once.
"""

import numpy as np
from typing import Iterable

from ParityGrid.encoding.codec import BitsLike, to_bits
from ParityGrid.encoding.constants import BIT_DTYPE
from ParityGrid.protocol.encoder import Encoder
from ParityGrid.protocol.layout import PARITY_LAYOUT, Axis, check_geometry


def encode_batch(encoder: Encoder, inputs: Iterable[BitsLike]) -> np.ndarray:
    """
    Encodes a batch of data bit sequences.

    Args:
        encoder: Encoder to use for every block
        inputs: Iterable of data bit sequences

    Returns:
        Array of shape (batch_size, block_length)
    """
    blocks = [encoder.encode(bits).data for bits in inputs]
    if not blocks:
        return np.zeros((0, encoder.block_length), dtype=BIT_DTYPE)
    return np.stack(blocks)


def batch_parities(blocks: np.ndarray) -> np.ndarray:
    """
    Computes all five parities for a stack of blocks.

    Args:
        blocks: Array of shape (batch_size, block_length)

    Returns:
        Array of shape (batch_size, 5): the four directional parities in
        PARITY_LAYOUT order followed by the overall parity
    """
    arr = np.asarray(blocks)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D stack of blocks, got shape {arr.shape}.")
    n, length = arr.shape
    side = check_geometry(length)
    bits = to_bits(arr).reshape(n, length)
    grid = bits.reshape(n, side, side)

    parities = []
    for group in PARITY_LAYOUT:
        idx = group.indices(side)
        covered = grid[:, :, idx] if group.axis is Axis.COLUMN else grid[:, idx, :]
        parities.append(np.bitwise_xor.reduce(covered.reshape(n, side * len(idx)), axis=1))
    parities.append(np.bitwise_xor.reduce(bits, axis=1))
    return np.stack(parities, axis=1).astype(BIT_DTYPE)


def validate_batch(blocks: np.ndarray) -> np.ndarray:
    """
    Validates a stack of blocks.

    Returns:
        Boolean array, True where a block passes validation
    """
    return ~batch_parities(blocks).any(axis=1)
