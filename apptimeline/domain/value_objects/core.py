from dataclasses import dataclass
from typing import TypeAlias, Union

# JSON-like value carried by primary filters, other info, event info and
# related entity ids.
EntityValue: TypeAlias = Union[
    str, int, float, bool, None, list["EntityValue"], dict[str, "EntityValue"]
]


@dataclass(frozen=True)
class EntityIdentifier:
    """Value object for the (entity_type, entity_id) identity key"""

    entity_type: str | None
    entity_id: str | None

    def is_complete(self) -> bool:
        """Both halves of the key are present"""
        return bool(self.entity_type) and bool(self.entity_id)

    def as_tuple(self) -> tuple[str | None, str | None]:
        return (self.entity_type, self.entity_id)

    def __str__(self) -> str:
        return f"{self.entity_type}/{self.entity_id}"
