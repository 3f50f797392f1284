"""
Block geometry and parity slot placement for ParityGrid.

A block of length L is read as an S x S matrix in row-major order
(index i sits at row i // S, column i % S). Four directional parity
groups each cover the rows or columns whose index has one particular
bit set:

    column group, bit 0  ->  columns {1, 3, 5, ...}
    column group, bit 1  ->  columns {2, 3, 6, 7, ...}
    row group, bit 0     ->  rows    {1, 3, 5, ...}
    row group, bit 1     ->  rows    {2, 3, 6, 7, ...}

Each group stores its parity bit in the one cell that lies inside that
group and outside the other three. For the 4 x 4 block those cells are
positions 1, 2, 4 and 8. Position 0 belongs to no group and carries the
overall parity.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

import numpy as np

from ParityGrid.encoding.constants import MIN_SIDE, OVERALL_PARITY_POSITION
from ParityGrid.errors import InvalidGeometryError


class Axis(Enum):
    COLUMN = "column"
    ROW = "row"


@dataclass(frozen=True)
class ParityGroup:
    """One directional parity group: a set of full columns or full rows."""

    axis: Axis
    index_bit: int

    @property
    def name(self) -> str:
        return f"{self.axis.value}_bit{self.index_bit}"

    def indices(self, side: int) -> List[int]:
        """Gets the column (or row) indices covered by this group."""
        mask = 1 << self.index_bit
        return [i for i in range(side) if i & mask]

    def slot(self, side: int) -> int:
        """Gets the block position that stores this group's parity bit."""
        offset = 1 << self.index_bit
        if self.axis is Axis.COLUMN:
            return offset
        return offset * side


# Order here is the order parities are computed AND the order their slots
# are filled.
PARITY_LAYOUT: Tuple[ParityGroup, ...] = (
    ParityGroup(Axis.COLUMN, 0),
    ParityGroup(Axis.COLUMN, 1),
    ParityGroup(Axis.ROW, 0),
    ParityGroup(Axis.ROW, 1),
)


def check_geometry(block_length) -> int:
    """
    Checks that a block length describes a usable square layout.

    Args:
        block_length: Total number of bits in the block

    Returns:
        Side length of the square matrix

    Raises:
        InvalidGeometryError: If the length is not a perfect square whose
            side is a power of two of at least MIN_SIDE
    """
    if isinstance(block_length, bool) or not isinstance(block_length, (int, np.integer)):
        raise InvalidGeometryError(block_length, "length must be an integer")
    block_length = int(block_length)
    if block_length <= 0:
        raise InvalidGeometryError(block_length, "length must be positive")

    side = math.isqrt(block_length)
    if side * side != block_length:
        raise InvalidGeometryError(block_length, "length is not a perfect square")
    if side & (side - 1):
        raise InvalidGeometryError(
            block_length, f"side {side} is not a power of two"
        )
    if side < MIN_SIDE:
        raise InvalidGeometryError(
            block_length, f"side {side} is smaller than {MIN_SIDE}"
        )
    return side


def reserved_positions(block_length: int) -> List[int]:
    """
    Gets the parity slots of a block, in PARITY_LAYOUT order.

    For the 16-bit block this is [1, 2, 4, 8].
    """
    side = check_geometry(block_length)
    return [group.slot(side) for group in PARITY_LAYOUT]


def data_positions(block_length: int) -> List[int]:
    """Gets the data slots of a block in ascending order."""
    reserved = set(reserved_positions(block_length))
    return [
        i for i in range(OVERALL_PARITY_POSITION + 1, block_length)
        if i not in reserved
    ]


@dataclass(frozen=True)
class BlockGeometry:
    """
    Resolved layout of a block.

    Structure (16-bit block, P = directional parity, O = overall):
        O P P d
        P d d d
        P d d d
        d d d d
    """

    length: int
    side: int
    reserved: Tuple[int, ...]
    data_slots: Tuple[int, ...]

    @classmethod
    def from_length(cls, block_length: int) -> "BlockGeometry":
        side = check_geometry(block_length)
        return cls(
            length=int(block_length),
            side=side,
            reserved=tuple(reserved_positions(block_length)),
            data_slots=tuple(data_positions(block_length)),
        )

    @property
    def data_capacity(self) -> int:
        """Gets the number of data bits one block carries."""
        return len(self.data_slots)

    def locate(self, position: int) -> Tuple[int, int]:
        """Gets the (row, column) of a block position."""
        if not 0 <= position < self.length:
            raise IndexError(f"Position {position} is outside a {self.length}-bit block.")
        return divmod(position, self.side)
