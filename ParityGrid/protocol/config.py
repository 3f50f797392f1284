"""
Encoder configuration for ParityGrid.
"""

from dataclasses import dataclass

from ParityGrid.encoding.constants import DEFAULT_DATA_BITS, DEFAULT_PARITY_BITS


@dataclass(frozen=True)
class EncoderConfig:
    """
    Capacities fixed for the lifetime of an encoder.

    The block length is data_bits + parity_bits. With strict_length off,
    data bits beyond the block's data slots are ignored instead of
    rejected.
    """

    data_bits: int = DEFAULT_DATA_BITS
    parity_bits: int = DEFAULT_PARITY_BITS
    strict_length: bool = True

    @property
    def block_length(self) -> int:
        """Gets the total block length in bits."""
        return self.data_bits + self.parity_bits

    def to_dict(self) -> dict:
        """Gets a dictionary representation of the config."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith("_")
        }

    @classmethod
    def from_dict(cls, d: dict) -> "EncoderConfig":
        """Creates an EncoderConfig from a dictionary."""
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})
