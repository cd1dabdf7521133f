"""Final-phase handlers."""

from __future__ import annotations

import logging

from pivotgraph.pipeline.context import ShapeContext
from pivotgraph.pipeline.shape_object import ShapeObject

logger = logging.getLogger(__name__)


def log_shaping_result(ctx: ShapeContext, sobj: ShapeObject) -> ShapeObject:
    """Log one line per shaped pivot."""
    result_count = sobj.summary.result_count if sobj.summary else 0
    type_count = len(sobj.summary.entities) if sobj.summary else 0
    logger.info(
        f"Shaped pivot {sobj.pivot.id}: {len(sobj.pivot.events)} events -> "
        f"{len(sobj.nodes)} nodes, {len(sobj.deduped_edges)} edges "
        f"(+{len(sobj.inferred_edges)} inferred), {result_count} entities in {type_count} types"
    )
    return sobj
