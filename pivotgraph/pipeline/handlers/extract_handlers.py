"""Extract-phase handlers."""

from __future__ import annotations

from pivotgraph.extractor import HyperGraphExtractor
from pivotgraph.pipeline.context import ShapeContext
from pivotgraph.pipeline.shape_object import ShapeObject


def shape_hypergraph(ctx: ShapeContext, sobj: ShapeObject) -> ShapeObject:
    """Convert the pivot's events into hub/entity nodes and hyperedges."""
    extractor = HyperGraphExtractor(ctx.event_id_field, ctx.provenance, new_token=ctx.new_token)
    graph = extractor.extract(sobj.pivot)
    sobj.nodes = graph.nodes
    sobj.edges = graph.edges
    return sobj
