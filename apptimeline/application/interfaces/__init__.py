"""Application interfaces (ports)."""

from apptimeline.application.interfaces.services import IEntityCodec

__all__ = [
    "IEntityCodec",
]
