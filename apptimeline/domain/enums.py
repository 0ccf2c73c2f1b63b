"""Domain enumerations for AppTimeline."""

from enum import Enum


class PutErrorCode(int, Enum):
    """Reasons an entity submission is rejected by the aggregator"""

    NO_START_TIME = 1
    IO_EXCEPTION = 2
    MISSING_IDENTITY = 3

    @classmethod
    def values(cls) -> list[int]:
        """Get all valid values"""
        return [code.value for code in cls]
