"""ShapeObject: the data carrier flowing through the shaping pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pivotgraph.models import Pivot, ResultSummary


@dataclass
class ShapeObject:
    pivot: Pivot
    app: Any = None
    # Populated by handlers
    nodes: List[Dict[str, Any]] = field(default_factory=list)
    edges: List[Dict[str, Any]] = field(default_factory=list)
    deduped_edges: List[Dict[str, Any]] = field(default_factory=list)
    inferred_edges: List[Dict[str, Any]] = field(default_factory=list)
    summary: Optional[ResultSummary] = None

    @property
    def graph(self) -> List[Dict[str, Any]]:
        """Final edge list: deduped edges followed by inferred ones."""
        return self.deduped_edges + self.inferred_edges
