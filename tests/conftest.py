"""Shared test fixtures for pytest"""

import pytest

from apptimeline.domain.entities import TimelineEntity, TimelineEvent
from apptimeline.infrastructure.config.settings import get_settings

# A fixed epoch-millis timestamp for reproducible tests
START_TIME = 1385998245000


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Settings are cached per process; tests that patch the environment need a fresh read"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def submitted_event() -> TimelineEvent:
    return TimelineEvent(
        timestamp=START_TIME,
        event_type="APP_SUBMITTED",
        event_info={"queue": "default"},
    )


@pytest.fixture
def finished_event() -> TimelineEvent:
    return TimelineEvent(
        timestamp=START_TIME + 60_000,
        event_type="APP_FINISHED",
        event_info={"exit_status": 0, "successful": True},
    )


@pytest.fixture
def populated_entity(submitted_event, finished_event) -> TimelineEntity:
    """Entity with every field set, including every kind of value"""
    return TimelineEntity(
        "APPLICATION",
        "application_1385998245_0001",
        START_TIME,
        events=[submitted_event, finished_event],
        related_entities={
            "APP_ATTEMPT": ["appattempt_1385998245_0001_000001", "appattempt_1385998245_0001_000002"],
            "CONTAINER": [1, 2.5, True, None],
        },
        primary_filters={"user": "alice", "queue": "default", "priority": 3},
        other_info={
            "progress": 0.75,
            "diagnostics": "",
            "tags": ["etl", "nightly"],
            "resources": {"memory_mb": 1024, "vcores": 2, "labels": {"gpu": False}},
            "tracking_url": None,
        },
    )
