"""
Block encoder and validator for ParityGrid.
"""

from typing import Optional, Tuple

import numpy as np

from ParityGrid.encoding.codec import BitsLike, to_bits
from ParityGrid.encoding.constants import BIT_DTYPE, OVERALL_PARITY_POSITION
from ParityGrid.errors import (
    CorruptedBlockError,
    ExcessInputError,
    InsufficientInputError,
    InvalidGeometryError,
)
from ParityGrid.protocol.config import EncoderConfig
from ParityGrid.protocol.layout import BlockGeometry
from ParityGrid.protocol.message import Message
from ParityGrid.protocol.parity import directional_parities, overall_parity
from ParityGrid.utils.logging import get_logger


def validate_block(block: BitsLike) -> bool:
    """
    Checks a received block against its parity bits.

    Recomputes the four directional parities and the overall parity
    without modifying the block.

    Args:
        block: Block of valid geometry

    Returns:
        True only if all five parities are 0
    """
    bits = to_bits(block)
    if any(directional_parities(bits)):
        return False
    return overall_parity(bits) == 0


class Encoder:
    """
    Encodes data bits into square parity blocks.

    The encoder is immutable after construction and holds no per-call
    state, so one instance can be shared across threads.
    """

    def __init__(
        self,
        data_bits: int,
        parity_bits: int,
        strict_length: bool = True,
    ):
        """
        Initializes an encoder for a fixed block size.

        Args:
            data_bits: Data capacity requested by the caller
            parity_bits: Parity capacity requested by the caller
            strict_length: Reject data sequences longer than the data slots

        Raises:
            InvalidGeometryError: If data_bits + parity_bits is not a square
                with a power-of-two side of at least 4
        """
        if data_bits < 0 or parity_bits < 0:
            raise ValueError("Capacities must be non-negative.")

        self._config = EncoderConfig(data_bits, parity_bits, strict_length)
        self._geometry = BlockGeometry.from_length(self._config.block_length)
        self.logger = get_logger("encoder")
        self.logger.debug(
            f"Encoder ready: {self._geometry.side}x{self._geometry.side} block, "
            f"{self._geometry.data_capacity} data slots, "
            f"parity slots {list(self._geometry.reserved)}"
        )

    @classmethod
    def from_config(cls, config: EncoderConfig) -> "Encoder":
        """Creates an encoder from an EncoderConfig."""
        return cls(config.data_bits, config.parity_bits, config.strict_length)

    @property
    def config(self) -> EncoderConfig:
        return self._config

    @property
    def geometry(self) -> BlockGeometry:
        return self._geometry

    @property
    def block_length(self) -> int:
        return self._geometry.length

    @property
    def data_capacity(self) -> int:
        """Gets the number of data bits each block actually carries."""
        return self._geometry.data_capacity

    @property
    def reserved_positions(self) -> Tuple[int, ...]:
        return self._geometry.reserved

    def encode(self, data_bits: BitsLike) -> Message:
        """
        Encodes one block.

        Data bits fill the non-reserved positions from 1 upwards, the four
        directional parities go into the reserved positions, and the
        overall parity goes into position 0.

        Args:
            data_bits: Sequence of 0/1 values, one per data slot

        Returns:
            Completed block as a Message

        Raises:
            InvalidBitError: If a value is not 0 or 1
            InsufficientInputError: If fewer bits than data slots are given
            ExcessInputError: If more bits are given and strict_length is set
        """
        bits = to_bits(data_bits)
        needed = self._geometry.data_capacity

        if len(bits) < needed:
            self.logger.debug(f"Rejected input: {len(bits)} of {needed} data bits")
            raise InsufficientInputError(needed, len(bits))
        if len(bits) > needed and self._config.strict_length:
            self.logger.debug(f"Rejected input: {len(bits)} bits for {needed} data slots")
            raise ExcessInputError(needed, len(bits))

        block = np.zeros(self._geometry.length, dtype=BIT_DTYPE)
        block[list(self._geometry.data_slots)] = bits[:needed]

        parities = directional_parities(block)
        for position, parity in zip(self._geometry.reserved, parities):
            block[position] = parity

        block[OVERALL_PARITY_POSITION] = overall_parity(block)
        return Message(block)

    @staticmethod
    def validate(block: BitsLike) -> bool:
        """Checks a received block. See validate_block."""
        return validate_block(block)

    def decode(self, block: BitsLike) -> np.ndarray:
        """
        Extracts the data bits from a block produced by this encoder.

        Args:
            block: Received block

        Returns:
            Data bits in the order they were encoded

        Raises:
            InvalidGeometryError: If the block length does not match
            CorruptedBlockError: If the block fails validation
        """
        bits = to_bits(block)
        if len(bits) != self._geometry.length:
            raise InvalidGeometryError(
                len(bits), f"encoder expects {self._geometry.length}-bit blocks"
            )
        if not validate_block(bits):
            raise CorruptedBlockError("Block failed parity validation.")
        return bits[list(self._geometry.data_slots)]

    def __repr__(self) -> str:
        return (
            f"Encoder(data_bits={self._config.data_bits}, "
            f"parity_bits={self._config.parity_bits}, "
            f"strict_length={self._config.strict_length})"
        )


def encode(data_bits: BitsLike, encoder: Optional[Encoder] = None) -> Message:
    """Encodes one block, using the default 16-bit encoder when none is given."""
    if encoder is None:
        encoder = Encoder.from_config(EncoderConfig())
    return encoder.encode(data_bits)
