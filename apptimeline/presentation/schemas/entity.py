"""
Wire schemas for timeline entities.

Field names follow the timeline document format (entitytype, entity,
starttime, ...). Absent and null containers both decode to empty ones.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator

from apptimeline.domain.entities import (TimelineEntities, TimelineEntity,
                                         TimelineEvent, TimelinePutError,
                                         TimelinePutErrors)
from apptimeline.domain.enums import PutErrorCode


class TimelineEventSchema(BaseModel):
    timestamp: int = 0
    event_type: str | None = Field(default=None, alias="eventtype")
    event_info: dict[str, JsonValue] = Field(default_factory=dict, alias="eventinfo")

    model_config = ConfigDict(populate_by_name=True, ser_json_inf_nan="constants")

    @field_validator("timestamp", mode="before")
    @classmethod
    def default_timestamp(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("event_info", mode="before")
    @classmethod
    def default_event_info(cls, v: Any) -> Any:
        return {} if v is None else v

    @classmethod
    def from_event(cls, event: TimelineEvent) -> "TimelineEventSchema":
        return cls(
            timestamp=event.timestamp,
            event_type=event.event_type,
            event_info=dict(event.event_info),
        )

    def to_event(self) -> TimelineEvent:
        return TimelineEvent(
            timestamp=self.timestamp,
            event_type=self.event_type,
            event_info=self.event_info,
        )


class TimelineEntitySchema(BaseModel):
    entity_type: str | None = Field(default=None, alias="entitytype")
    entity_id: str | None = Field(default=None, alias="entity")
    start_time: int = Field(default=0, alias="starttime")
    events: list[TimelineEventSchema] = Field(default_factory=list)
    related_entities: dict[str, list[JsonValue]] = Field(
        default_factory=dict, alias="relatedentities"
    )
    primary_filters: dict[str, JsonValue] = Field(default_factory=dict, alias="primaryfilters")
    other_info: dict[str, JsonValue] = Field(default_factory=dict, alias="otherinfo")

    model_config = ConfigDict(
        populate_by_name=True,
        ser_json_inf_nan="constants",
        json_schema_extra={
            "example": {
                "entitytype": "APPLICATION",
                "entity": "application_1385998245_0001",
                "starttime": 1385998245000,
                "events": [
                    {
                        "timestamp": 1385998245000,
                        "eventtype": "APP_SUBMITTED",
                        "eventinfo": {"queue": "default"},
                    }
                ],
                "relatedentities": {"APP_ATTEMPT": ["appattempt_1385998245_0001_000001"]},
                "primaryfilters": {"user": "alice"},
                "otherinfo": {"diagnostics": ""},
            }
        },
    )

    @field_validator("start_time", mode="before")
    @classmethod
    def default_start_time(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("events", mode="before")
    @classmethod
    def default_events(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("related_entities", "primary_filters", "other_info", mode="before")
    @classmethod
    def default_mapping(cls, v: Any) -> Any:
        return {} if v is None else v

    @classmethod
    def from_entity(cls, entity: TimelineEntity) -> "TimelineEntitySchema":
        return cls(
            entity_type=entity.entity_type,
            entity_id=entity.entity_id,
            start_time=entity.start_time,
            events=[TimelineEventSchema.from_event(event) for event in entity.events],
            related_entities={
                entity_type: list(ids) for entity_type, ids in entity.related_entities.items()
            },
            primary_filters=dict(entity.primary_filters),
            other_info=dict(entity.other_info),
        )

    def to_entity(self) -> TimelineEntity:
        return TimelineEntity(
            self.entity_type,
            self.entity_id,
            self.start_time,
            events=[event.to_event() for event in self.events],
            related_entities=self.related_entities,
            primary_filters=self.primary_filters,
            other_info=self.other_info,
        )


class TimelineEntitiesSchema(BaseModel):
    entities: list[TimelineEntitySchema] = Field(default_factory=list)

    # Infinity and NaN are written as JSON constants instead of null
    model_config = ConfigDict(ser_json_inf_nan="constants")

    @field_validator("entities", mode="before")
    @classmethod
    def default_entities(cls, v: Any) -> Any:
        return [] if v is None else v

    @classmethod
    def from_entities(cls, entities: TimelineEntities) -> "TimelineEntitiesSchema":
        return cls(entities=[TimelineEntitySchema.from_entity(entity) for entity in entities])

    def to_entities(self) -> TimelineEntities:
        return TimelineEntities(entity.to_entity() for entity in self.entities)


class TimelinePutErrorSchema(BaseModel):
    entity_id: str | None = Field(default=None, alias="entity")
    entity_type: str | None = Field(default=None, alias="entitytype")
    error_code: PutErrorCode = Field(alias="errorcode")

    model_config = ConfigDict(populate_by_name=True)


class TimelinePutErrorsSchema(BaseModel):
    errors: list[TimelinePutErrorSchema] = Field(default_factory=list)

    @field_validator("errors", mode="before")
    @classmethod
    def default_errors(cls, v: Any) -> Any:
        return [] if v is None else v

    @classmethod
    def from_put_errors(cls, put_errors: TimelinePutErrors) -> "TimelinePutErrorsSchema":
        return cls(
            errors=[
                TimelinePutErrorSchema(
                    entity_id=error.entity_id,
                    entity_type=error.entity_type,
                    error_code=error.error_code,
                )
                for error in put_errors.errors
            ]
        )

    def to_put_errors(self) -> TimelinePutErrors:
        return TimelinePutErrors(
            errors=[
                TimelinePutError(
                    entity_id=error.entity_id,
                    entity_type=error.entity_type,
                    error_code=error.error_code,
                )
                for error in self.errors
            ]
        )
