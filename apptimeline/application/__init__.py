"""
Application layer - Application Business Rules.

This layer contains:
- Interfaces (ports) for the wire codecs
- Application services that compose domain merge operations
"""

from apptimeline.application.interfaces import IEntityCodec
from apptimeline.application.services import EntityAggregator

__all__ = [
    # Interfaces
    "IEntityCodec",
    # Services
    "EntityAggregator",
]
