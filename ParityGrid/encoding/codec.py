"""
Conversions between caller-supplied bit sequences and block arrays.
"""

import numpy as np
from typing import List, Sequence, Union

from ParityGrid.encoding.constants import BIT_DTYPE
from ParityGrid.errors import InvalidBitError


BitsLike = Union[Sequence[int], np.ndarray]


def to_bits(values: BitsLike) -> np.ndarray:
    """
    Normalizes a bit sequence into a flat uint8 array.

    Args:
        values: List, tuple, or array of 0/1 values

    Returns:
        New 1-D array of dtype uint8

    Raises:
        InvalidBitError: If any value is not 0 or 1
    """
    arr = np.asarray(values).reshape(-1)
    if arr.size == 0:
        return np.zeros(0, dtype=BIT_DTYPE)

    if arr.dtype.kind not in "biuf":
        for idx, value in enumerate(arr.tolist()):
            if value not in (0, 1):
                raise InvalidBitError(idx, value)
        return arr.astype(BIT_DTYPE)

    bad = np.flatnonzero((arr != 0) & (arr != 1))
    if bad.size:
        idx = int(bad[0])
        raise InvalidBitError(idx, arr[idx].item())

    return arr.astype(BIT_DTYPE)


def bits_to_string(bits: BitsLike) -> str:
    """Converts bits to a compact string such as '1011'."""
    return "".join(str(int(b)) for b in to_bits(bits))


def string_to_bits(text: str) -> List[int]:
    """
    Parses a string of '0'/'1' characters into a bit list.

    Whitespace, '_' and ',' are ignored so blocks can be written row by row.
    """
    bits = []
    for i, c in enumerate(ch for ch in text if ch not in " \t\n_,"):
        if c not in "01":
            raise InvalidBitError(i, c)
        bits.append(int(c))
    return bits
