"""JSON wire codec backed by the pydantic wire schemas"""

from pydantic import ValidationError

from apptimeline.domain.entities import (TimelineEntities, TimelineEntity,
                                         TimelinePutErrors)
from apptimeline.infrastructure.exceptions import EntitySerializationException
from apptimeline.presentation.schemas.entity import (TimelineEntitiesSchema,
                                                     TimelineEntitySchema,
                                                     TimelinePutErrorsSchema)
from apptimeline.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class JsonEntityCodec:
    """Encode and decode timeline documents as JSON"""

    wire_format = "json"
    content_type = "application/json"

    def __init__(self, indent: int | None = None):
        self.indent = indent

    def encode_entity(self, entity: TimelineEntity) -> str:
        try:
            schema = TimelineEntitySchema.from_entity(entity)
        except ValidationError as exc:
            raise EntitySerializationException(self.wire_format, str(exc)) from exc
        logger.debug("Encoding entity %s as JSON", entity.identifier)
        return schema.model_dump_json(by_alias=True, indent=self.indent)

    def decode_entity(self, document: str | bytes) -> TimelineEntity:
        try:
            schema = TimelineEntitySchema.model_validate_json(document)
        except ValidationError as exc:
            raise EntitySerializationException(self.wire_format, str(exc)) from exc
        return schema.to_entity()

    def encode_entities(self, entities: TimelineEntities) -> str:
        try:
            schema = TimelineEntitiesSchema.from_entities(entities)
        except ValidationError as exc:
            raise EntitySerializationException(self.wire_format, str(exc)) from exc
        logger.debug("Encoding %d entities as JSON", len(entities))
        return schema.model_dump_json(by_alias=True, indent=self.indent)

    def decode_entities(self, document: str | bytes) -> TimelineEntities:
        try:
            schema = TimelineEntitiesSchema.model_validate_json(document)
        except ValidationError as exc:
            raise EntitySerializationException(self.wire_format, str(exc)) from exc
        return schema.to_entities()

    def encode_put_errors(self, put_errors: TimelinePutErrors) -> str:
        schema = TimelinePutErrorsSchema.from_put_errors(put_errors)
        return schema.model_dump_json(by_alias=True, indent=self.indent)

    def decode_put_errors(self, document: str | bytes) -> TimelinePutErrors:
        try:
            schema = TimelinePutErrorsSchema.model_validate_json(document)
        except ValidationError as exc:
            raise EntitySerializationException(self.wire_format, str(exc)) from exc
        return schema.to_put_errors()
