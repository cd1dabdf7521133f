"""
Graph Normalization, Hyperedge Dedup and Inference

Call contracts the shaping pipeline depends on, plus the default
implementations it uses when a caller injects none:

- normalize(nodes, edges) -> None         assigns canonicalType in place
- dedupe(edges) -> edges                  first occurrence per signature, order kept
- inference(nodes, edges, encodings) -> new edges, inputs untouched
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional, Protocol, Sequence, Tuple

logger = logging.getLogger(__name__)

Node = Dict[str, Any]
Edge = Dict[str, Any]


class Normalize(Protocol):
    def __call__(self, nodes: List[Node], edges: List[Edge]) -> None: ...


class Dedupe(Protocol):
    def __call__(self, edges: List[Edge]) -> List[Edge]: ...


class Inference(Protocol):
    def __call__(self, nodes: Sequence[Node], edges: Sequence[Edge], encodings: Any) -> List[Edge]: ...


def value_key(value: Any) -> Hashable:
    """Identity key for a raw cell value.

    Numbers and their string forms share a key: 1, 1.0 and "1" are the same
    entity. Surrounding whitespace is ignored.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


# =============================================================================
# Normalization
# =============================================================================

# Raw field name (lowercased) -> canonical type
DEFAULT_TYPE_ALIASES: Dict[str, str] = {
    "ip": "ip",
    "src_ip": "ip",
    "dest_ip": "ip",
    "dst_ip": "ip",
    "source_ip": "ip",
    "destination_ip": "ip",
    "clientip": "ip",
    "mac": "mac",
    "src_mac": "mac",
    "dest_mac": "mac",
    "host": "host",
    "hostname": "host",
    "src_host": "host",
    "dest_host": "host",
    "domain": "domain",
    "url": "url",
    "uri": "url",
    "user": "user",
    "username": "user",
    "src_user": "user",
    "dest_user": "user",
    "email": "email",
    "file": "file",
    "file_name": "file",
    "filename": "file",
    "hash": "hash",
    "md5": "hash",
    "sha1": "hash",
    "sha256": "hash",
    "process": "process",
    "process_name": "process",
    "port": "port",
    "src_port": "port",
    "dest_port": "port",
    "alert": "alert",
    "signature": "alert",
    "index": "index",
    "product": "product",
    "vendor": "vendor",
}


class FieldTypeNormalizer:
    """Assigns canonicalType from a node's raw field type.

    Hub nodes (typed by the event identity field) become "event"; known field
    names map through an alias table; anything else keeps its raw type.
    A canonicalType already present on a node is left alone.
    """

    def __init__(self, event_id_field: str, aliases: Optional[Mapping[str, str]] = None):
        self.event_id_field = event_id_field
        self.aliases = dict(DEFAULT_TYPE_ALIASES if aliases is None else aliases)

    def canonical_type(self, raw_type: Any) -> Optional[str]:
        if raw_type is None:
            return None
        if raw_type == self.event_id_field:
            return "event"
        return self.aliases.get(str(raw_type).lower(), str(raw_type))

    def __call__(self, nodes: List[Node], edges: List[Edge]) -> None:
        for node in nodes:
            if node.get("canonicalType") is None:
                node["canonicalType"] = self.canonical_type(node.get("type"))


# =============================================================================
# Dedup
# =============================================================================

def hyperedge_signature(edge: Mapping[str, Any]) -> Tuple[Hashable, Any, Hashable]:
    return (
        value_key(edge.get("source")),
        edge.get("edgeType"),
        value_key(edge.get("destination")),
    )


def dedupe_hyperedges(edges: Sequence[Edge]) -> List[Edge]:
    """Collapse edges sharing (source, edgeType, destination), keeping the first."""
    seen = set()
    deduped = []
    for edge in edges:
        signature = hyperedge_signature(edge)
        if signature in seen:
            continue
        seen.add(signature)
        deduped.append(edge)
    if len(deduped) != len(edges):
        logger.debug(f"Deduped hyperedges {len(edges)} -> {len(deduped)}")
    return deduped


# =============================================================================
# Inference
# =============================================================================

def no_inference(nodes: Sequence[Node], edges: Sequence[Edge], encodings: Any) -> List[Edge]:
    """Default inference: nothing beyond the literal source data."""
    return []


def compose_inference(*rules: Callable[..., List[Edge]]) -> Callable[..., List[Edge]]:
    """Run several inference rules over the same inputs and concatenate their edges."""
    def inference(nodes: Sequence[Node], edges: Sequence[Edge], encodings: Any) -> List[Edge]:
        inferred: List[Edge] = []
        for rule in rules:
            inferred.extend(rule(nodes, edges, encodings))
        return inferred
    return inference
