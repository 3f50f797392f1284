DEFAULT_DATA_BITS = 12
DEFAULT_PARITY_BITS = 4
DEFAULT_BLOCK_LENGTH = DEFAULT_DATA_BITS + DEFAULT_PARITY_BITS

# Smallest side that fits four distinct single-bit row/column groups.
MIN_SIDE = 4

OVERALL_PARITY_POSITION = 0

BIT_DTYPE = "uint8"
