"""ShapePipeline: synchronous phase-ordered handler chain."""

from __future__ import annotations

import logging
from typing import List

from pivotgraph.pipeline.context import ShapeContext
from pivotgraph.pipeline.handler import Handler, HandlerType
from pivotgraph.pipeline.shape_object import ShapeObject

logger = logging.getLogger(__name__)

PHASES = [
    HandlerType.Extract,
    HandlerType.Encode,
    HandlerType.Normalize,
    HandlerType.Dedupe,
    HandlerType.Infer,
    HandlerType.Summarize,
    HandlerType.Final,
]


class ShapePipeline:
    """Runs a ShapeObject through every phase in order.

    Handler errors propagate to the caller unchanged; there is no retry and
    no partial result.
    """

    def __init__(self, ctx: ShapeContext, handlers: List[Handler]):
        self.ctx = ctx
        self.handlers = handlers

    def process(self, sobj: ShapeObject) -> ShapeObject:
        for phase in PHASES:
            sobj = self._call_handler_chain(phase, sobj)
        return sobj

    def _call_handler_chain(self, handler_type: HandlerType, sobj: ShapeObject) -> ShapeObject:
        for handler in self.handlers:
            if handler.handler_type != handler_type:
                continue
            result = handler(self.ctx, sobj)
            if isinstance(result, ShapeObject):
                sobj = result
        logger.debug(f"Phase {handler_type} done for pivot {sobj.pivot.id}")
        return sobj
