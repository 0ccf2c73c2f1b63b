"""
AppTimeline - timeline entity records with merge semantics.

Entities, events and related records tracked by a timeline service, plus the
aggregator and wire codecs that move them around.
"""

from apptimeline.domain.entities import (TimelineEntities, TimelineEntity,
                                         TimelineEvent, TimelinePutError,
                                         TimelinePutErrors)
from apptimeline.domain.enums import PutErrorCode
from apptimeline.domain.value_objects import EntityIdentifier

__version__ = "1.0.0"

__all__ = [
    "EntityIdentifier",
    "PutErrorCode",
    "TimelineEntities",
    "TimelineEntity",
    "TimelineEvent",
    "TimelinePutError",
    "TimelinePutErrors",
]
