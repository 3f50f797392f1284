"""
ParityGrid - Square Parity Block Encoder

Packs data bits into a square bit matrix with four directional parity
bits and one overall parity bit, so receivers can detect corrupted
blocks by recomputing the parity relations.
"""

from ParityGrid.version import __version__

from ParityGrid.errors import (
    ParityGridError,
    InvalidGeometryError,
    InsufficientInputError,
    ExcessInputError,
    InvalidBitError,
    CorruptedBlockError,
)

from ParityGrid.protocol.encoder import Encoder, encode, validate_block
from ParityGrid.protocol.message import Message
from ParityGrid.protocol.config import EncoderConfig
from ParityGrid.protocol.layout import reserved_positions, data_positions

from ParityGrid.encoding.batch import encode_batch, validate_batch
from ParityGrid.data.generators import create_random_message

from ParityGrid import protocol
from ParityGrid import encoding
from ParityGrid import data
from ParityGrid import analysis

__all__ = [
    "__version__",
    "ParityGridError",
    "InvalidGeometryError",
    "InsufficientInputError",
    "ExcessInputError",
    "InvalidBitError",
    "CorruptedBlockError",
    "Encoder",
    "encode",
    "validate_block",
    "Message",
    "EncoderConfig",
    "reserved_positions",
    "data_positions",
    "encode_batch",
    "validate_batch",
    "create_random_message",
    "protocol",
    "encoding",
    "data",
    "analysis",
]
