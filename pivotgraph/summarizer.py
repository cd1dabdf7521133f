"""Per-type counts and representative examples over a normalized node list."""

from __future__ import annotations

from typing import Any, Dict, Hashable, Optional, Sequence, Set

from pivotgraph.graph_ops import value_key
from pivotgraph.layouts import POINT_COLOR_ENCODING, POINT_ICON_ENCODING, CategoricalEncoding
from pivotgraph.models import EntitySummary, ResultSummary


def summarize_output(
    labels: Sequence[Dict[str, Any]],
    icons: Optional[CategoricalEncoding] = None,
    colors: Optional[CategoricalEncoding] = None,
) -> ResultSummary:
    """Summarize nodes by canonicalType.

    Each entity entry counts the distinct node identities of its type; a node
    repeated in the list counts once. `example` is the index of the first
    node of that type. Entries are ordered by first appearance.
    """
    icons = icons or POINT_ICON_ENCODING
    colors = colors or POINT_COLOR_ENCODING

    summaries: Dict[Optional[str], EntitySummary] = {}
    seen: Dict[Optional[str], Set[Hashable]] = {}

    for i, label in enumerate(labels):
        canonical_type = label.get("canonicalType")
        summary = summaries.get(canonical_type)
        if summary is None:
            summary = EntitySummary(
                count=0,
                example=i,
                name=canonical_type,
                icon=icons.lookup(canonical_type),
                color=colors.lookup(canonical_type),
            )
            summaries[canonical_type] = summary
            seen[canonical_type] = set()

        key = value_key(label.get("node"))
        if key not in seen[canonical_type]:
            seen[canonical_type].add(key)
            summary.count += 1

    entities = list(summaries.values())
    return ResultSummary(
        entities=entities,
        result_count=sum(entity.count for entity in entities),
    )
