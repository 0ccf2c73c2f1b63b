"""
Timeline entity domain entity.

The canonical record describing one tracked entity (an application, an
attempt, a container or any user-defined unit of work) together with its
events, related entities, primary filters and other info.

Entities arrive incrementally, so the record is built to absorb partial
submissions for the same (entity_type, entity_id):

- events and related entity ids are append-only
- primary filters and other info are upserts, last write wins
- the add operations never raise; a None argument is a no-op

Primary filters are meant to be indexed by a downstream store, so callers
should keep them to scalars or small structured values and put everything
else in other info. Nothing here enforces that.

Container getters return read-only views. Mutate through the add operations
or replace a whole container through its setter.
"""

import copy
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from apptimeline.domain.entities.event import TimelineEvent
from apptimeline.domain.exceptions import EntityIdentityMismatchException
from apptimeline.domain.value_objects.core import (EntityIdentifier,
                                                   EntityValue)


class TimelineEntity:
    """
    Domain entity for a tracked timeline entity.

    Not synchronized: one owner mutates it at a time. Hand-off to a store
    transfers ownership.
    """

    def __init__(
        self,
        entity_type: str | None = None,
        entity_id: str | None = None,
        start_time: int | None = 0,
        *,
        events: Iterable[TimelineEvent] | None = None,
        related_entities: Mapping[str, Iterable[EntityValue]] | None = None,
        primary_filters: Mapping[str, EntityValue] | None = None,
        other_info: Mapping[str, EntityValue] | None = None,
    ):
        self._entity_type = entity_type
        self._entity_id = entity_id
        self.start_time = start_time
        self._events: list[TimelineEvent] = []
        self._related_entities: dict[str, list[EntityValue]] = {}
        self._primary_filters: dict[str, EntityValue] = {}
        self._other_info: dict[str, EntityValue] = {}

        self.events = events
        self.related_entities = related_entities
        self.primary_filters = primary_filters
        self.other_info = other_info

    # Identity and start time

    @property
    def entity_type(self) -> str | None:
        return self._entity_type

    @entity_type.setter
    def entity_type(self, entity_type: str | None) -> None:
        self._entity_type = entity_type

    @property
    def entity_id(self) -> str | None:
        return self._entity_id

    @entity_id.setter
    def entity_id(self, entity_id: str | None) -> None:
        self._entity_id = entity_id

    @property
    def identifier(self) -> EntityIdentifier:
        return EntityIdentifier(self._entity_type, self._entity_id)

    @property
    def start_time(self) -> int:
        """Epoch millis of the first known timestamp, 0 when unset"""
        return self._start_time

    @start_time.setter
    def start_time(self, start_time: int | None) -> None:
        self._start_time = start_time or 0

    # Events

    @property
    def events(self) -> tuple[TimelineEvent, ...]:
        return tuple(self._events)

    @events.setter
    def events(self, events: Iterable[TimelineEvent] | None) -> None:
        self._events = list(events) if events is not None else []

    def add_event(self, event: TimelineEvent) -> None:
        self._events.append(event)

    def add_events(self, events: Iterable[TimelineEvent] | None) -> None:
        if events is not None:
            self._events.extend(events)

    def earliest_event_timestamp(self) -> int | None:
        timestamps = [event.timestamp for event in self._events if event.timestamp]
        return min(timestamps) if timestamps else None

    # Related entities

    @property
    def related_entities(self) -> Mapping[str, tuple[EntityValue, ...]]:
        return MappingProxyType(
            {entity_type: tuple(ids) for entity_type, ids in self._related_entities.items()}
        )

    @related_entities.setter
    def related_entities(
        self, related_entities: Mapping[str, Iterable[EntityValue]] | None
    ) -> None:
        self._related_entities = {
            entity_type: list(ids) for entity_type, ids in (related_entities or {}).items()
        }

    def add_related_entity(
        self, entity_type: str, entity_ids: Iterable[EntityValue] | None
    ) -> None:
        """Append ids for one related entity type; duplicates are kept"""
        if entity_ids is None:
            return
        entity_ids = list(entity_ids)
        if not entity_ids:
            return
        self._related_entities.setdefault(entity_type, []).extend(entity_ids)

    def add_related_entities(
        self, related_entities: Mapping[str, Iterable[EntityValue]] | None
    ) -> None:
        for entity_type, entity_ids in (related_entities or {}).items():
            self.add_related_entity(entity_type, entity_ids)

    # Primary filters

    @property
    def primary_filters(self) -> Mapping[str, EntityValue]:
        return MappingProxyType(self._primary_filters)

    @primary_filters.setter
    def primary_filters(self, primary_filters: Mapping[str, EntityValue] | None) -> None:
        self._primary_filters = dict(primary_filters or {})

    def add_primary_filter(self, key: str, value: EntityValue) -> None:
        self._primary_filters[key] = value

    def add_primary_filters(self, primary_filters: Mapping[str, EntityValue] | None) -> None:
        if primary_filters:
            self._primary_filters.update(primary_filters)

    # Other info

    @property
    def other_info(self) -> Mapping[str, EntityValue]:
        return MappingProxyType(self._other_info)

    @other_info.setter
    def other_info(self, other_info: Mapping[str, EntityValue] | None) -> None:
        self._other_info = dict(other_info or {})

    def add_other_info(self, key: str, value: EntityValue) -> None:
        self._other_info[key] = value

    def add_other_info_map(self, other_info: Mapping[str, EntityValue] | None) -> None:
        if other_info:
            self._other_info.update(other_info)

    # Whole-entity operations

    def merge(self, other: "TimelineEntity") -> None:
        """
        Fold a partial submission for the same identity into this record.

        Events and related entity ids from `other` are appended after the
        existing ones, primary filters and other info from `other` win on
        collision, and the earlier non-zero start time is kept. Identity
        halves that are None here are adopted from `other`; an empty string
        is a value like any other.

        Raises:
            EntityIdentityMismatchException: If both records set an identity
                half and the values differ
        """
        for mine, theirs in zip(self.identifier.as_tuple(), other.identifier.as_tuple()):
            if mine is not None and theirs is not None and mine != theirs:
                raise EntityIdentityMismatchException(
                    self.identifier.as_tuple(), other.identifier.as_tuple()
                )

        if self._entity_type is None:
            self._entity_type = other.entity_type
        if self._entity_id is None:
            self._entity_id = other.entity_id
        if other.start_time and (not self._start_time or other.start_time < self._start_time):
            self._start_time = other.start_time

        self.add_events(other._events)
        self.add_related_entities(other._related_entities)
        self.add_primary_filters(other._primary_filters)
        self.add_other_info_map(other._other_info)

    def copy(self) -> "TimelineEntity":
        """Deep copy; the result shares no containers or events with this record"""
        return TimelineEntity(
            self._entity_type,
            self._entity_id,
            self._start_time,
            events=[event.copy() for event in self._events],
            related_entities=copy.deepcopy(self._related_entities),
            primary_filters=copy.deepcopy(self._primary_filters),
            other_info=copy.deepcopy(self._other_info),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimelineEntity):
            return NotImplemented
        return (
            self._entity_type == other._entity_type
            and self._entity_id == other._entity_id
            and self._start_time == other._start_time
            and self._events == other._events
            and self._related_entities == other._related_entities
            and self._primary_filters == other._primary_filters
            and self._other_info == other._other_info
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"TimelineEntity(entity_type={self._entity_type!r}, "
            f"entity_id={self._entity_id!r}, start_time={self._start_time}, "
            f"events={len(self._events)}, related_entities={len(self._related_entities)}, "
            f"primary_filters={len(self._primary_filters)}, other_info={len(self._other_info)})"
        )
