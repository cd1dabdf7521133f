"""
Shape Pivot Results

Entry point used by the pivot service: turns a pivot's event rows into a
deduplicated hypergraph plus a per-type entity summary.

    {"app": app, "pivot": {..., "results": {"graph", "labels"}, "resultSummary"}}
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from pivotgraph.models import Pivot, ShapedResults, coerce_pivot
from pivotgraph.pipeline import Handler, ShapeContext, ShapeObject, ShapePipeline, default_context

logger = logging.getLogger(__name__)


def _default_handlers() -> List[Handler]:
    from pivotgraph.pipeline.handlers import DEFAULT_HANDLERS
    return DEFAULT_HANDLERS


def shape_results(
    app: Any,
    pivot: Union[Pivot, Mapping[str, Any]],
    ctx: Optional[ShapeContext] = None,
    handlers: Optional[List[Handler]] = None,
    by_alias: bool = False,
) -> dict:
    """Run Extract -> Encode -> Normalize -> Dedupe -> Infer -> Summarize over one pivot.

    The pivot is validated into a private copy first; the caller's rows and
    graph are never mutated. Raises ShapeError for malformed pivots or rows.

    out["pivot"] is a Pivot model (`pivot.results`, `pivot.result_summary`).
    With by_alias=True it is a plain dict with the service's camelCase keys
    (`pivot["results"]`, `pivot["resultSummary"]`).
    """
    owned = coerce_pivot(pivot)
    pipeline = ShapePipeline(
        ctx=ctx or default_context(),
        handlers=_default_handlers() if handlers is None else handlers,
    )
    sobj = pipeline.process(ShapeObject(pivot=owned, app=app))

    shaped = owned.model_copy(update={
        "results": ShapedResults(graph=sobj.graph, labels=sobj.nodes),
        "result_summary": sobj.summary,
    })
    if by_alias:
        return {"app": app, "pivot": shaped.model_dump(by_alias=True)}
    return {"app": app, "pivot": shaped}
