"""
Encoded block returned by the ParityGrid encoder.
"""

from dataclasses import dataclass
from typing import Iterator, List

import numpy as np

from ParityGrid.protocol.layout import check_geometry


@dataclass(frozen=True, eq=False)
class Message:
    """
    Completed block: data bits, four directional parities and the
    overall parity at position 0.

    The underlying array is read-only; use flipped() to get a mutable,
    corrupted copy.
    """

    data: np.ndarray

    def __post_init__(self):
        arr = np.array(self.data, dtype=np.uint8).reshape(-1)
        arr.setflags(write=False)
        object.__setattr__(self, "data", arr)

    @property
    def side(self) -> int:
        return check_geometry(len(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[int]:
        return (int(b) for b in self.data)

    def __getitem__(self, index):
        return self.data[index]

    def __array__(self, dtype=None, copy=None):
        if dtype is not None:
            return self.data.astype(dtype)
        if copy:
            return self.data.copy()
        return self.data

    def __eq__(self, other) -> bool:
        if isinstance(other, Message):
            return np.array_equal(self.data, other.data)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.data.tobytes())

    def to_list(self) -> List[int]:
        return [int(b) for b in self.data]

    def as_matrix(self) -> np.ndarray:
        """Gets a read-only S x S view of the block."""
        return self.data.reshape(self.side, self.side)

    def flipped(self, *positions: int) -> np.ndarray:
        """Gets a writable copy of the block with the given bits inverted."""
        altered = self.data.copy()
        for p in positions:
            if not 0 <= p < len(altered):
                raise IndexError(f"Position {p} is outside a {len(altered)}-bit block.")
            altered[p] ^= 1
        return altered

    def __str__(self) -> str:
        return "\n".join(" ".join(str(int(b)) for b in row) for row in self.as_matrix())
