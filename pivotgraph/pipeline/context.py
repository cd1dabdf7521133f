"""ShapeContext: collaborators and settings shared by all handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from pivotgraph import settings
from pivotgraph.extractor import new_event_token
from pivotgraph.graph_ops import (
    Dedupe,
    FieldTypeNormalizer,
    Inference,
    Normalize,
    dedupe_hyperedges,
    no_inference,
)
from pivotgraph.layouts import POINT_COLOR_ENCODING, POINT_ICON_ENCODING, CategoricalEncoding
from pivotgraph.provenance import ProvenanceTracker


@dataclass
class ShapeContext:
    event_id_field: str
    provenance: ProvenanceTracker
    normalize: Normalize
    dedupe: Dedupe = dedupe_hyperedges
    inference: Inference = no_inference
    inference_enabled: bool = True
    new_token: Callable[[], str] = new_event_token
    icons: CategoricalEncoding = field(default_factory=lambda: POINT_ICON_ENCODING)
    colors: CategoricalEncoding = field(default_factory=lambda: POINT_COLOR_ENCODING)


def default_context(
    event_id_field: Optional[str] = None,
    propagated_labels: Optional[Sequence[str]] = None,
    **overrides,
) -> ShapeContext:
    """Build a context from environment settings, overriding any field by keyword."""
    event_id_field = event_id_field or settings.EVENT_ID_FIELD
    overrides.setdefault("inference_enabled", settings.INFERENCE_ENABLED)
    overrides.setdefault("normalize", FieldTypeNormalizer(event_id_field))
    return ShapeContext(
        event_id_field=event_id_field,
        provenance=ProvenanceTracker(propagated_labels),
        **overrides,
    )
