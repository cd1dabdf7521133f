"""Pivot shaping pipeline: Extract -> Encode -> Normalize -> Dedupe -> Infer -> Summarize."""

from pivotgraph.pipeline.context import ShapeContext, default_context
from pivotgraph.pipeline.handler import Handler, HandlerType
from pivotgraph.pipeline.pipeline import ShapePipeline
from pivotgraph.pipeline.shape_object import ShapeObject

__all__ = [
    "ShapePipeline",
    "ShapeObject",
    "ShapeContext",
    "default_context",
    "Handler",
    "HandlerType",
]
