"""Application services."""

from apptimeline.application.services.entity_aggregator import \
    EntityAggregator

__all__ = [
    "EntityAggregator",
]
