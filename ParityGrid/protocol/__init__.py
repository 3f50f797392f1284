from ParityGrid.protocol.layout import (
    Axis,
    ParityGroup,
    PARITY_LAYOUT,
    BlockGeometry,
    check_geometry,
    reserved_positions,
    data_positions,
)
from ParityGrid.protocol.parity import (
    block_to_matrix,
    column_group_parity,
    row_group_parity,
    directional_parities,
    overall_parity,
)
from ParityGrid.protocol.message import Message
from ParityGrid.protocol.config import EncoderConfig
from ParityGrid.protocol.encoder import Encoder, encode, validate_block

__all__ = [
    "Axis",
    "ParityGroup",
    "PARITY_LAYOUT",
    "BlockGeometry",
    "check_geometry",
    "reserved_positions",
    "data_positions",
    "block_to_matrix",
    "column_group_parity",
    "row_group_parity",
    "directional_parities",
    "overall_parity",
    "Message",
    "EncoderConfig",
    "Encoder",
    "encode",
    "validate_block",
]
