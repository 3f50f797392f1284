"""
Parity computations over a square block.
"""

import numpy as np
from typing import Iterable, List

from ParityGrid.encoding.codec import BitsLike, to_bits
from ParityGrid.protocol.layout import PARITY_LAYOUT, Axis, ParityGroup, check_geometry


def block_to_matrix(block: BitsLike) -> np.ndarray:
    """Reshapes a block into its S x S row-major matrix."""
    bits = to_bits(block)
    side = check_geometry(len(bits))
    return bits.reshape(side, side)


def _checked(indices: Iterable[int], height: int) -> List[int]:
    indices = [int(i) for i in indices]
    for i in indices:
        if not 0 <= i < height:
            raise IndexError(f"Index {i} is outside a block of height {height}.")
    return indices


def _xor_reduce(bits: np.ndarray) -> int:
    return int(np.bitwise_xor.reduce(bits.ravel()))


def column_group_parity(block: BitsLike, columns: Iterable[int]) -> int:
    """
    XOR of every bit in the given full columns.

    Args:
        block: Block of valid geometry
        columns: Column indices in [0, height)

    Returns:
        Parity bit (0 or 1)
    """
    matrix = block_to_matrix(block)
    cols = _checked(columns, matrix.shape[0])
    return _xor_reduce(matrix[:, cols])


def row_group_parity(block: BitsLike, rows: Iterable[int]) -> int:
    """
    XOR of every bit in the given full rows.

    Args:
        block: Block of valid geometry
        rows: Row indices in [0, height)

    Returns:
        Parity bit (0 or 1)
    """
    matrix = block_to_matrix(block)
    rows = _checked(rows, matrix.shape[0])
    return _xor_reduce(matrix[rows, :])


def _group_parity(matrix: np.ndarray, group: ParityGroup) -> int:
    indices = group.indices(matrix.shape[0])
    if group.axis is Axis.COLUMN:
        return _xor_reduce(matrix[:, indices])
    return _xor_reduce(matrix[indices, :])


def directional_parities(block: BitsLike) -> List[int]:
    """
    Computes the four directional parities in PARITY_LAYOUT order:
    column bit 0, column bit 1, row bit 0, row bit 1.
    """
    matrix = block_to_matrix(block)
    return [_group_parity(matrix, group) for group in PARITY_LAYOUT]


def overall_parity(block: BitsLike) -> int:
    """XOR of every bit in the block."""
    return _xor_reduce(to_bits(block))
