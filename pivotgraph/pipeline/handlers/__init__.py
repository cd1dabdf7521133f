"""Default handler registry for the shaping pipeline."""

from pivotgraph.pipeline.handler import Handler, HandlerType
from pivotgraph.pipeline.handlers.extract_handlers import shape_hypergraph
from pivotgraph.pipeline.handlers.encode_handlers import apply_template_encodings
from pivotgraph.pipeline.handlers.graph_handlers import (
    dedupe_graph,
    infer_edges,
    normalize_graph,
)
from pivotgraph.pipeline.handlers.summary_handlers import summarize_entities
from pivotgraph.pipeline.handlers.final_handlers import log_shaping_result

DEFAULT_HANDLERS = [
    Handler(handler_type=HandlerType.Extract, fn=shape_hypergraph),
    Handler(handler_type=HandlerType.Encode, fn=apply_template_encodings),
    Handler(handler_type=HandlerType.Normalize, fn=normalize_graph),
    Handler(handler_type=HandlerType.Dedupe, fn=dedupe_graph),
    Handler(handler_type=HandlerType.Infer, fn=infer_edges),
    Handler(handler_type=HandlerType.Summarize, fn=summarize_entities),
    Handler(handler_type=HandlerType.Final, fn=log_shaping_result),
]
