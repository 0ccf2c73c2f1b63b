"""Wire schemas."""

from apptimeline.presentation.schemas.entity import (TimelineEntitiesSchema,
                                                     TimelineEntitySchema,
                                                     TimelineEventSchema,
                                                     TimelinePutErrorSchema,
                                                     TimelinePutErrorsSchema)

__all__ = [
    "TimelineEventSchema",
    "TimelineEntitySchema",
    "TimelineEntitiesSchema",
    "TimelinePutErrorSchema",
    "TimelinePutErrorsSchema",
]
