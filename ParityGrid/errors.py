"""
Exceptions raised by the ParityGrid encoder.
"""


class ParityGridError(ValueError):
    """Base error for all ParityGrid operations."""
    pass


class InvalidGeometryError(ParityGridError):
    """Block length is not a square with a power-of-two side."""

    def __init__(self, block_length, reason: str):
        self.block_length = block_length
        super().__init__(f"Invalid block length {block_length!r}: {reason}")


class InsufficientInputError(ParityGridError):
    """Fewer data bits were supplied than the block has data slots."""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Block needs {expected} data bits, got {received}."
        )


class ExcessInputError(ParityGridError):
    """More data bits were supplied than the block has data slots."""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        super().__init__(
            f"Block holds {expected} data bits, got {received}. "
            f"Use strict_length=False to ignore the trailing bits."
        )


class InvalidBitError(ParityGridError):
    """A value outside {0, 1} was found where a bit was expected."""

    def __init__(self, position: int, value):
        self.position = position
        self.value = value
        super().__init__(f"Value {value!r} at index {position} is not a bit.")


class CorruptedBlockError(ParityGridError):
    """Block failed parity validation."""
    pass
