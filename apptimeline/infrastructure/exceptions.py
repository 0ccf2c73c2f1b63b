"""
Infrastructure exceptions for AppTimeline.

Raised by the wire codecs that move timeline entities in and out of
documents.
"""

from apptimeline.domain.exceptions import TimelineException


class SerializationException(TimelineException):
    """Base exception for wire encoding operations."""

    pass


class EntitySerializationException(SerializationException):
    """Document could not be encoded or decoded."""

    def __init__(self, wire_format: str, reason: str):
        super().__init__(
            f"Failed to process {wire_format} document: {reason}",
            "SERIALIZATION_ERROR",
            {"wire_format": wire_format, "reason": reason},
        )


class UnsupportedWireFormatException(SerializationException):
    """No codec is registered for the requested format."""

    def __init__(self, wire_format: str, supported: list[str]):
        super().__init__(
            f"Unsupported wire format: {wire_format}",
            "UNSUPPORTED_WIRE_FORMAT",
            {"wire_format": wire_format, "supported": supported},
        )
