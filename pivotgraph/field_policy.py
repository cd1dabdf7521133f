"""Pure rules deciding which row fields become entities and which become attributes.

No module-level state. Blacklists always win over allow lists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, FrozenSet, List, Mapping, Optional, Sequence

from pivotgraph.settings import STAR

logger = logging.getLogger(__name__)

# Placeholder cells that search backends emit for blank values
_EMPTY_LITERALS = {"", '""', "''"}


def is_star(connections: Optional[Sequence[str]]) -> bool:
    """True when every field is an entity candidate."""
    return not connections or STAR in connections


def is_valid_reference(value: Any) -> bool:
    """A cell can name an entity only if it is not blank or a quoted blank."""
    if value is None:
        return False
    return str(value).strip() not in _EMPTY_LITERALS


@dataclass(frozen=True)
class FieldPolicy:
    """Connection and attribute policy of one pivot, evaluated once per pivot."""
    event_id_field: str
    star: bool
    connections: FrozenSet[str]
    connections_blacklist: FrozenSet[str]
    attributes: FrozenSet[str]
    attributes_blacklist: FrozenSet[str]

    @classmethod
    def from_lists(
        cls,
        event_id_field: str,
        connections: Optional[Sequence[str]] = None,
        connections_blacklist: Optional[Sequence[str]] = None,
        attributes: Optional[Sequence[str]] = None,
        attributes_blacklist: Optional[Sequence[str]] = None,
    ) -> "FieldPolicy":
        policy = cls(
            event_id_field=event_id_field,
            star=is_star(connections),
            connections=frozenset(connections or ()),
            connections_blacklist=frozenset(connections_blacklist or ()),
            attributes=frozenset(attributes or ()),
            attributes_blacklist=frozenset(attributes_blacklist or ()),
        )
        conflicts = policy.attributes & policy.attributes_blacklist
        if conflicts:
            logger.debug(f"Attributes both allowed and blacklisted, dropping: {sorted(conflicts)}")
        conflicts = policy.connections & policy.connections_blacklist
        if conflicts:
            logger.debug(f"Connections both allowed and blacklisted, dropping: {sorted(conflicts)}")
        return policy

    @classmethod
    def for_pivot(cls, pivot, event_id_field: str) -> "FieldPolicy":
        return cls.from_lists(
            event_id_field,
            connections=pivot.connections,
            connections_blacklist=pivot.connections_blacklist,
            attributes=pivot.attributes,
            attributes_blacklist=pivot.attributes_blacklist,
        )

    def connects_type(self, field: str) -> bool:
        """Whether nodes of this type survive the connections filter."""
        return self.star or field == self.event_id_field or field in self.connections

    def entity_fields(self, row: Mapping[str, Any]) -> List[str]:
        return [
            field for field, value in row.items()
            if field != self.event_id_field
            and (self.star or field in self.connections)
            and field not in self.connections_blacklist
            and value is not None
        ]

    def attribute_fields(self, row: Mapping[str, Any]) -> List[str]:
        return [
            field for field, value in row.items()
            if value is not None
            and (field == self.event_id_field or not self.attributes or field in self.attributes)
            and field not in self.attributes_blacklist
        ]
