"""
Timeline event domain entity.

A timestamped, named occurrence attached to a timeline entity, carrying
free-form event info.
"""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime

from apptimeline.domain.value_objects.core import EntityValue
from apptimeline.shared.utils.datetime import (from_timestamp_ms_utc,
                                               to_timestamp_ms)


@dataclass
class TimelineEvent:
    """
    Domain entity for one event of a timeline entity.

    timestamp is epoch milliseconds; 0 means unset.
    """

    timestamp: int = 0
    event_type: str | None = None
    event_info: dict[str, EntityValue] = field(default_factory=dict)

    def __post_init__(self):
        self.event_info = dict(self.event_info) if self.event_info else {}

    @classmethod
    def at(
        cls,
        event_type: str,
        when: datetime,
        event_info: Mapping[str, EntityValue] | None = None,
    ) -> "TimelineEvent":
        """Build an event from a datetime (naive values are treated as UTC)"""
        return cls(
            timestamp=to_timestamp_ms(when),
            event_type=event_type,
            event_info=dict(event_info or {}),
        )

    @property
    def occurred_at(self) -> datetime:
        return from_timestamp_ms_utc(self.timestamp)

    def add_event_info(self, key: str, value: EntityValue) -> None:
        self.event_info[key] = value

    def add_event_info_map(self, event_info: Mapping[str, EntityValue] | None) -> None:
        if event_info:
            self.event_info.update(event_info)

    def set_event_info(self, event_info: Mapping[str, EntityValue] | None) -> None:
        """Replace the whole event info map"""
        self.event_info = dict(event_info) if event_info else {}

    def sort_key(self) -> tuple[int, str]:
        """Most recent first, then by event type"""
        return (-self.timestamp, self.event_type or "")

    def copy(self) -> "TimelineEvent":
        return TimelineEvent(
            timestamp=self.timestamp,
            event_type=self.event_type,
            event_info=copy.deepcopy(self.event_info),
        )
