"""Tests for logging configuration and time helpers"""

import logging
from datetime import UTC, datetime

from apptimeline.application.services import EntityAggregator
from apptimeline.domain.entities import TimelineEntity
from apptimeline.infrastructure.serialization import JsonEntityCodec
from apptimeline.shared.telemetry.logging import get_logger, setup_logging
from apptimeline.shared.utils import (ensure_utc, from_timestamp_ms_utc,
                                      to_timestamp_ms)


class TestLogging:

    def test_get_logger_uses_module_name(self):
        assert get_logger("apptimeline.test").name == "apptimeline.test"

    def test_setup_logging_level_follows_debug(self, monkeypatch):
        monkeypatch.setenv("APPTIMELINE_DEBUG", "true")
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        root.handlers = []

        try:
            setup_logging()
            assert root.level == logging.DEBUG
        finally:
            root.handlers = saved_handlers
            root.setLevel(saved_level)

    def test_package_log_levels(self, caplog):
        """
        GIVEN a put call with one accepted and one rejected entity, then an encode
        WHEN the package logs at every level
        THEN the aggregator logs the summary at INFO and the rejection at WARNING,
            the codec logs at DEBUG, and the domain record logs nothing
        """
        entity = TimelineEntity("APPLICATION", "app_1", 1)

        with caplog.at_level(logging.DEBUG, logger="apptimeline"):
            EntityAggregator(derive_start_time_from_events=False).put(
                [entity, TimelineEntity("APPLICATION", "app_2")]
            )
            JsonEntityCodec().encode_entity(entity)
            entity.merge(TimelineEntity("APPLICATION", "app_1", 2))

        levels = {
            (record.name, record.levelno)
            for record in caplog.records
            if record.name.startswith("apptimeline")
        }
        assert ("apptimeline.application.services.entity_aggregator", logging.INFO) in levels
        assert ("apptimeline.application.services.entity_aggregator", logging.WARNING) in levels
        assert ("apptimeline.infrastructure.serialization.json_codec", logging.DEBUG) in levels
        assert not any(name.startswith("apptimeline.domain") for name, _ in levels)


class TestTimestamps:

    def test_epoch_millis_round_trip(self):
        when = datetime(2013, 12, 2, 15, 30, 45, 123000, tzinfo=UTC)

        assert to_timestamp_ms(when) == 1385998245123
        assert from_timestamp_ms_utc(1385998245123) == when

    def test_naive_is_treated_as_utc(self):
        naive = datetime(1970, 1, 1, 0, 0, 1)

        assert ensure_utc(naive).tzinfo is UTC
        assert to_timestamp_ms(naive) == 1000
