"""Normalize, Dedupe and Infer phase handlers.

The collaborators behind these phases are injected through ShapeContext.
Their errors propagate unchanged.
"""

from __future__ import annotations

import logging

from pivotgraph.pipeline.context import ShapeContext
from pivotgraph.pipeline.shape_object import ShapeObject

logger = logging.getLogger(__name__)


def normalize_graph(ctx: ShapeContext, sobj: ShapeObject) -> ShapeObject:
    """Assign canonicalType to every node in place."""
    ctx.normalize(sobj.nodes, sobj.edges)
    return sobj


def dedupe_graph(ctx: ShapeContext, sobj: ShapeObject) -> ShapeObject:
    """Collapse hyperedges with the same src->reftype->dst."""
    sobj.deduped_edges = list(ctx.dedupe(sobj.edges))
    return sobj


def infer_edges(ctx: ShapeContext, sobj: ShapeObject) -> ShapeObject:
    """Add inferred edges after the deduped ones. Inferred edges are never deduped away."""
    if not ctx.inference_enabled:
        logger.debug(f"Inference disabled, skipping for pivot {sobj.pivot.id}")
        sobj.inferred_edges = []
        return sobj
    sobj.inferred_edges = list(
        ctx.inference(tuple(sobj.nodes), tuple(sobj.deduped_edges), sobj.pivot.encodings)
    )
    return sobj
