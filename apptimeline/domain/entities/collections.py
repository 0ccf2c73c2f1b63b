"""
Collection envelopes exchanged with the store: a batch of entities going in,
and the per-entity errors coming back.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from apptimeline.domain.entities.entity import TimelineEntity
from apptimeline.domain.enums import PutErrorCode


class TimelineEntities:
    """Ordered batch of timeline entities"""

    def __init__(self, entities: Iterable[TimelineEntity] | None = None):
        self._entities: list[TimelineEntity] = list(entities or [])

    @property
    def entities(self) -> tuple[TimelineEntity, ...]:
        return tuple(self._entities)

    @entities.setter
    def entities(self, entities: Iterable[TimelineEntity] | None) -> None:
        self._entities = list(entities or [])

    def add_entity(self, entity: TimelineEntity) -> None:
        self._entities.append(entity)

    def add_entities(self, entities: Iterable[TimelineEntity] | None) -> None:
        self._entities.extend(entities or [])

    def __iter__(self):
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimelineEntities):
            return NotImplemented
        return self._entities == other._entities

    __hash__ = None

    def __repr__(self) -> str:
        return f"TimelineEntities({self._entities!r})"


@dataclass(frozen=True)
class TimelinePutError:
    """Why one submitted entity was not accepted"""

    entity_id: str | None
    entity_type: str | None
    error_code: PutErrorCode


@dataclass
class TimelinePutErrors:
    """Errors from one put call; empty means every entity was accepted"""

    errors: list[TimelinePutError] = field(default_factory=list)

    def add_error(self, error: TimelinePutError) -> None:
        self.errors.append(error)

    def add_errors(self, errors: Iterable[TimelinePutError] | None) -> None:
        self.errors.extend(errors or [])

    def has_errors(self) -> bool:
        return bool(self.errors)
