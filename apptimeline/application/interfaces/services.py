"""
Service interfaces (ports) for the application layer.

These protocols define the contract the wire codecs satisfy. Following Dependency Inversion Principle (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from apptimeline.domain.entities import (TimelineEntities,
                                             TimelineEntity,
                                             TimelinePutErrors)


class IEntityCodec(Protocol):
    """Protocol for wire codecs (DIP)"""

    wire_format: str
    content_type: str

    def encode_entity(self, entity: TimelineEntity) -> str:
        """Encode one entity as a document"""
        ...

    def decode_entity(self, document: str | bytes) -> TimelineEntity:
        """Decode one entity from a document"""
        ...

    def encode_entities(self, entities: TimelineEntities) -> str:
        """Encode a batch of entities"""
        ...

    def decode_entities(self, document: str | bytes) -> TimelineEntities:
        """Decode a batch of entities"""
        ...

    def encode_put_errors(self, put_errors: TimelinePutErrors) -> str:
        """Encode the errors of a put call"""
        ...

    def decode_put_errors(self, document: str | bytes) -> TimelinePutErrors:
        """Decode the errors of a put call"""
        ...
