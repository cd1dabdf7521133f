"""Summarize-phase handlers."""

from __future__ import annotations

from pivotgraph.pipeline.context import ShapeContext
from pivotgraph.pipeline.shape_object import ShapeObject
from pivotgraph.summarizer import summarize_output


def summarize_entities(ctx: ShapeContext, sobj: ShapeObject) -> ShapeObject:
    sobj.summary = summarize_output(sobj.nodes, icons=ctx.icons, colors=ctx.colors)
    return sobj
