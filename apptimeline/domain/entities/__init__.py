"""Domain entities."""

from apptimeline.domain.entities.collections import (TimelineEntities,
                                                     TimelinePutError,
                                                     TimelinePutErrors)
from apptimeline.domain.entities.entity import TimelineEntity
from apptimeline.domain.entities.event import TimelineEvent

__all__ = [
    "TimelineEntity",
    "TimelineEvent",
    "TimelineEntities",
    "TimelinePutError",
    "TimelinePutErrors",
]
