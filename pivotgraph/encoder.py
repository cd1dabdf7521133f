"""Applies a template's point/edge encodings to shaped nodes and edges."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from pivotgraph.models import EncodingFn, Encodings

logger = logging.getLogger(__name__)


def _apply(records: List[Dict[str, Any]], encoders: Mapping[str, EncodingFn]) -> None:
    for record in records:
        for fn in encoders.values():
            fn(record)


def encode_graph(
    nodes: List[Dict[str, Any]],
    edges: List[Dict[str, Any]],
    encodings: Optional[Encodings],
) -> None:
    """Run every encoding function over every node (point) and edge (edge).

    Functions run in mapping key order and set attributes on the record they
    are given; any return value is ignored. Encodings must overwrite rather
    than accumulate, so running the pass twice gives the same result.
    """
    if encodings is None:
        return
    if encodings.point:
        _apply(nodes, encodings.point)
    if encodings.edge:
        _apply(edges, encodings.edge)
    logger.debug(
        f"Encoded {len(nodes)} nodes with {len(encodings.point or {})} point encodings, "
        f"{len(edges)} edges with {len(encodings.edge or {})} edge encodings"
    )
