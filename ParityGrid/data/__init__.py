"""
Data handling for ParityGrid.

Provides seeded random data bit generation.
"""

from ParityGrid.data.generators import MessageGenerator, create_random_message

__all__ = [
    "MessageGenerator",
    "create_random_message",
]
