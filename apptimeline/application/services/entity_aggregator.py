"""
Entity aggregator.

Accumulates partial submissions addressed to the same (entity_type,
entity_id) into one record per identity key, composing the merge operations
of TimelineEntity. Records are held in memory only.
"""

from collections.abc import Iterable

from apptimeline.domain.entities import (TimelineEntities, TimelineEntity,
                                         TimelinePutError, TimelinePutErrors)
from apptimeline.domain.enums import PutErrorCode
from apptimeline.domain.value_objects.core import EntityIdentifier
from apptimeline.infrastructure.config.settings import get_settings
from apptimeline.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class EntityAggregator:
    """
    Merges submissions by identity key.

    Rejected submissions are reported through TimelinePutErrors instead of
    raising, so one bad entity does not fail the rest of the batch:

    - MISSING_IDENTITY: entity_type or entity_id is empty
    - NO_START_TIME: no start time on the record, and none could be derived
      from event timestamps
    """

    def __init__(self, derive_start_time_from_events: bool | None = None):
        if derive_start_time_from_events is None:
            derive_start_time_from_events = get_settings().derive_start_time_from_events
        self.derive_start_time_from_events = derive_start_time_from_events
        self._entities: dict[EntityIdentifier, TimelineEntity] = {}

    def put(self, entities: TimelineEntities | Iterable[TimelineEntity]) -> TimelinePutErrors:
        """
        Merge each submitted entity into the accumulated record for its key.

        Submissions are copied, so callers keep ownership of what they pass in.

        Returns:
            Errors for the entities that were not accepted
        """
        put_errors = TimelinePutErrors()
        accepted = 0

        for entity in entities:
            error_code = self._put_one(entity)
            if error_code is None:
                accepted += 1
                continue
            logger.warning(
                "Rejected entity %s: %s", entity.identifier, error_code.name
            )
            put_errors.add_error(
                TimelinePutError(
                    entity_id=entity.entity_id,
                    entity_type=entity.entity_type,
                    error_code=error_code,
                )
            )

        logger.info(
            "Put accepted %d entities, rejected %d", accepted, len(put_errors.errors)
        )
        return put_errors

    def _put_one(self, entity: TimelineEntity) -> PutErrorCode | None:
        identifier = entity.identifier
        if not identifier.is_complete():
            return PutErrorCode.MISSING_IDENTITY

        submission = entity.copy()
        if not submission.start_time and self.derive_start_time_from_events:
            submission.start_time = submission.earliest_event_timestamp()

        existing = self._entities.get(identifier)
        if existing is None:
            if not submission.start_time:
                return PutErrorCode.NO_START_TIME
            self._entities[identifier] = submission
            logger.debug("Created record for %s", identifier)
        else:
            existing.merge(submission)
            logger.debug("Merged submission into %s", identifier)
        return None

    def get(self, entity_type: str, entity_id: str) -> TimelineEntity | None:
        """Get a copy of the accumulated record, or None if never accepted"""
        entity = self._entities.get(EntityIdentifier(entity_type, entity_id))
        return entity.copy() if entity is not None else None

    def entities(self, entity_type: str | None = None) -> TimelineEntities:
        """Copies of the accumulated records in first-seen order, optionally of one type"""
        return TimelineEntities(
            entity.copy()
            for identifier, entity in self._entities.items()
            if entity_type is None or identifier.entity_type == entity_type
        )

    def clear(self) -> None:
        self._entities.clear()

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entities
