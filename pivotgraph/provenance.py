"""Accumulates propagated labels (index, product, vendor, ...) onto entities."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from pivotgraph.settings import PROPAGATED_LABELS


class ProvenanceTracker:
    """Tracks where an entity was observed across the rows of one pivot.

    Each label maps to the distinct values seen for it, in order of first
    appearance.
    """

    def __init__(self, labels: Optional[Sequence[str]] = None):
        self.labels = list(PROPAGATED_LABELS if labels is None else labels)

    def snapshot(self, row: Mapping[str, Any]) -> Dict[str, List[Any]]:
        """Labels present on a row, each as a fresh one-element list."""
        return {
            label: [row[label]]
            for label in self.labels
            if row.get(label) is not None
        }

    def merge(self, entity: Dict[str, Any], row: Mapping[str, Any]) -> Dict[str, Any]:
        for label in self.labels:
            value = row.get(label)
            if value is None:
                continue
            seen = entity.get(label)
            if seen is None:
                entity[label] = [value]
            elif value not in seen:
                seen.append(value)
        return entity
