"""Unit tests for the entity batch and put error envelopes"""

import pytest

from apptimeline.domain.entities import (TimelineEntities, TimelineEntity,
                                         TimelinePutError, TimelinePutErrors)
from apptimeline.domain.enums import PutErrorCode


class TestTimelineEntities:

    def test_add_and_iterate_in_order(self):
        first = TimelineEntity("APP", "1")
        second = TimelineEntity("APP", "2")
        batch = TimelineEntities()

        batch.add_entity(first)
        batch.add_entities([second])
        batch.add_entities(None)

        assert len(batch) == 2
        assert list(batch) == [first, second]
        assert batch.entities == (first, second)

    def test_setter_replaces(self):
        batch = TimelineEntities([TimelineEntity("APP", "1")])

        batch.entities = None

        assert len(batch) == 0

    def test_equality(self):
        assert TimelineEntities([TimelineEntity("APP", "1")]) == TimelineEntities(
            [TimelineEntity("APP", "1")]
        )
        assert TimelineEntities() != TimelineEntities([TimelineEntity()])
        with pytest.raises(TypeError):
            hash(TimelineEntities())


class TestTimelinePutErrors:

    def test_empty_has_no_errors(self):
        assert not TimelinePutErrors().has_errors()

    def test_add_errors(self):
        put_errors = TimelinePutErrors()
        missing = TimelinePutError(None, "APP", PutErrorCode.MISSING_IDENTITY)

        put_errors.add_error(TimelinePutError("1", "APP", PutErrorCode.NO_START_TIME))
        put_errors.add_errors([missing])

        assert put_errors.has_errors()
        assert [error.error_code for error in put_errors.errors] == [
            PutErrorCode.NO_START_TIME,
            PutErrorCode.MISSING_IDENTITY,
        ]

    def test_error_codes(self):
        assert PutErrorCode.values() == [1, 2, 3]
        assert PutErrorCode(1) is PutErrorCode.NO_START_TIME
