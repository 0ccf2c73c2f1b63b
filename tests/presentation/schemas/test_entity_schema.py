"""Tests for the pydantic wire schemas"""

import pytest
from pydantic import ValidationError

from apptimeline.domain.entities import TimelineEntity
from apptimeline.presentation.schemas import (TimelineEntitySchema,
                                              TimelineEventSchema)


class TestTimelineEntitySchema:

    def test_from_entity_and_back(self, populated_entity):
        schema = TimelineEntitySchema.from_entity(populated_entity)

        assert schema.entity_id == "application_1385998245_0001"
        assert schema.related_entities["APP_ATTEMPT"] == [
            "appattempt_1385998245_0001_000001",
            "appattempt_1385998245_0001_000002",
        ]
        assert schema.to_entity() == populated_entity

    def test_accepts_wire_names_and_field_names(self):
        by_alias = TimelineEntitySchema.model_validate(
            {"entitytype": "APPLICATION", "entity": "app_1", "starttime": 5}
        )
        by_name = TimelineEntitySchema(entity_type="APPLICATION", entity_id="app_1", start_time=5)

        assert by_alias == by_name
        assert by_alias.to_entity() == TimelineEntity("APPLICATION", "app_1", 5)

    def test_dump_uses_wire_names(self):
        dumped = TimelineEntitySchema(entity_type="APPLICATION").model_dump(by_alias=True)

        assert dumped["entitytype"] == "APPLICATION"
        assert dumped["relatedentities"] == {}

    def test_example_is_valid(self):
        example = TimelineEntitySchema.model_config["json_schema_extra"]["example"]

        entity = TimelineEntitySchema.model_validate(example).to_entity()

        assert entity.events[0].event_info == {"queue": "default"}
        assert entity.primary_filters == {"user": "alice"}

    def test_rejects_non_json_values(self):
        with pytest.raises(ValidationError):
            TimelineEntitySchema(other_info={"bad": object()})


class TestTimelineEventSchema:

    def test_defaults(self):
        event = TimelineEventSchema.model_validate({}).to_event()

        assert event.timestamp == 0
        assert event.event_type is None
        assert event.event_info == {}
