"""Domain value objects."""

from apptimeline.domain.value_objects.core import (EntityIdentifier,
                                                   EntityValue)

__all__ = [
    "EntityIdentifier",
    "EntityValue",
]
