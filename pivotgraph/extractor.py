"""
Event Row -> Hypergraph Extraction

Each event row becomes one hub node plus one hyperedge per qualifying field,
pointing at an entity node for that field's value. Entities are shared across
the rows of one pivot: a value seen again grows the existing node's cols and
provenance instead of creating a duplicate.

Pre-existing nodes/edges on the pivot are merged in after extraction,
filtered by the same connections policy.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional

from pivotgraph.errors import ShapeError
from pivotgraph.field_policy import FieldPolicy, is_valid_reference
from pivotgraph.graph_ops import value_key
from pivotgraph.models import Pivot
from pivotgraph.provenance import ProvenanceTracker

logger = logging.getLogger(__name__)


def new_event_token() -> str:
    """Globally unique id for events that carry none."""
    return uuid.uuid4().hex


@dataclass
class HyperGraph:
    nodes: List[Dict[str, Any]] = field(default_factory=list)
    edges: List[Dict[str, Any]] = field(default_factory=list)


class HyperGraphExtractor:
    """Turns one pivot's event rows into hub nodes, entity nodes and hyperedges."""

    def __init__(
        self,
        event_id_field: str,
        provenance: ProvenanceTracker,
        new_token: Callable[[], str] = new_event_token,
    ):
        self.event_id_field = event_id_field
        self.provenance = provenance
        self.new_token = new_token

    def extract(self, pivot: Pivot) -> HyperGraph:
        policy = FieldPolicy.for_pivot(pivot, self.event_id_field)

        nodes: List[Dict[str, Any]] = []
        edges: List[Dict[str, Any]] = []
        entities: Dict[Hashable, Dict[str, Any]] = {}

        for i, row in enumerate(pivot.events):
            if not isinstance(row, Mapping):
                raise ShapeError(
                    f"Event {i} of pivot {pivot.id} is {type(row).__name__}, not a mapping",
                    code="INVALID_EVENT",
                )
            self._extract_row(row, policy, nodes, edges, entities)

        graph = self._combine(pivot, policy, nodes, edges)
        logger.debug(
            f"Extracted pivot {pivot.id}: {len(pivot.events)} events, "
            f"{len(entities)} entities, {len(graph.nodes)} nodes, {len(graph.edges)} edges"
        )
        return graph

    def _extract_row(
        self,
        row: Mapping[str, Any],
        policy: FieldPolicy,
        nodes: List[Dict[str, Any]],
        edges: List[Dict[str, Any]],
        entities: Dict[Hashable, Dict[str, Any]],
    ) -> None:
        event_id = row.get(self.event_id_field)
        if not is_valid_reference(event_id):
            event_id = self.new_token()

        attribs = {name: row[name] for name in policy.attribute_fields(row)}

        nodes.append({
            **attribs,
            "node": event_id,
            "type": self.event_id_field,
            **self.provenance.snapshot(row),
        })

        for name in policy.entity_fields(row):
            value = row[name]
            if not is_valid_reference(value):
                continue

            key = value_key(value)
            entity = entities.get(key)
            if entity is None:
                entity = {
                    "node": value,
                    "type": name,
                    "cols": [name],
                    **self.provenance.snapshot(row),
                }
                nodes.append(entity)
                entities[key] = entity
            else:
                cols = entity.setdefault("cols", [])
                if name not in cols:
                    cols.append(name)
                self.provenance.merge(entity, row)

            destination = entity["node"]
            edges.append({
                **attribs,
                "destination": destination,
                "source": event_id,
                "col": name,
                **self.provenance.snapshot(row),
                "edge": f"{event_id}:{name}",
                "edgeType": f"{self.event_id_field}->{name}",
                "edgeTitle": f"{event_id}->{destination}",
            })

    def _combine(
        self,
        pivot: Pivot,
        policy: FieldPolicy,
        nodes: List[Dict[str, Any]],
        edges: List[Dict[str, Any]],
    ) -> HyperGraph:
        pivot_nodes = pivot.graph.nodes if pivot.graph else []
        pivot_edges = pivot.graph.edges if pivot.graph else []

        combined_nodes = [
            node for node in nodes + [dict(node) for node in pivot_nodes]
            if policy.connects_type(node.get("type"))
        ]

        combined_edges = edges + [
            dict(edge) if "edge" in edge else {**edge, "edge": f"edge_{pivot.id}_{i}"}
            for i, edge in enumerate(pivot_edges)
        ]
        return HyperGraph(nodes=combined_nodes, edges=combined_edges)


def extract_hypergraph(
    pivot: Pivot,
    event_id_field: str,
    provenance: Optional[ProvenanceTracker] = None,
    new_token: Callable[[], str] = new_event_token,
) -> HyperGraph:
    extractor = HyperGraphExtractor(
        event_id_field,
        provenance or ProvenanceTracker(),
        new_token=new_token,
    )
    return extractor.extract(pivot)
