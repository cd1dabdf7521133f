"""Encode-phase handlers."""

from __future__ import annotations

from pivotgraph.encoder import encode_graph
from pivotgraph.pipeline.context import ShapeContext
from pivotgraph.pipeline.shape_object import ShapeObject


def apply_template_encodings(ctx: ShapeContext, sobj: ShapeObject) -> ShapeObject:
    encode_graph(sobj.nodes, sobj.edges, sobj.pivot.encodings)
    return sobj
