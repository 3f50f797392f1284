from ParityGrid.utils.logging import get_logger, ParityGridLogger
from ParityGrid.utils.timing import Timer, timed

__all__ = [
    "get_logger",
    "ParityGridLogger",
    "Timer",
    "timed",
]
