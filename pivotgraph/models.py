"""
Pivot Shaping Models

Pydantic models for the pivot handed to the shaping pipeline and for the
summary it produces. Field names follow the camelCase keys used by the
surrounding pivot service; Python code uses the snake_case attribute names.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from pivotgraph.errors import ShapeError

EncodingFn = Callable[[Dict[str, Any]], Any]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Pivot input
# =============================================================================

class PivotGraph(_CamelModel):
    """Nodes and edges a pivot already carries before shaping."""
    nodes: List[Dict[str, Any]] = []
    edges: List[Dict[str, Any]] = []


class Encodings(_CamelModel):
    """Template encodings: key name -> function applied to each node/edge."""
    model_config = ConfigDict(extra="allow")

    point: Optional[Dict[str, EncodingFn]] = None
    edge: Optional[Dict[str, EncodingFn]] = None


class Template(_CamelModel):
    model_config = ConfigDict(extra="allow")

    encodings: Optional[Encodings] = None


# =============================================================================
# Shaping output
# =============================================================================

class EntitySummary(_CamelModel):
    count: int = 0
    example: int            # index into results.labels of the first node of this type
    name: Optional[str]     # canonical type
    icon: str
    color: str


class ResultSummary(_CamelModel):
    entities: List[EntitySummary] = []
    result_count: int = 0


class ShapedResults(_CamelModel):
    graph: List[Dict[str, Any]] = []    # edges
    labels: List[Dict[str, Any]] = []   # nodes


class Pivot(_CamelModel):
    """A unit of shaping work. Unknown keys are kept and passed through."""
    model_config = ConfigDict(extra="allow")

    id: Optional[Union[str, int]] = None
    events: List[Dict[str, Any]] = []
    graph: Optional[PivotGraph] = None
    attributes: List[str] = []
    attributes_blacklist: List[str] = []
    connections: List[str] = []
    connections_blacklist: List[str] = []
    template: Template = Field(default_factory=Template)
    results: Optional[ShapedResults] = None
    result_summary: Optional[ResultSummary] = None

    @field_validator(
        "events",
        "attributes",
        "attributes_blacklist",
        "connections",
        "connections_blacklist",
        mode="before",
    )
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("template", mode="before")
    @classmethod
    def _none_as_default_template(cls, value):
        return {} if value is None else value

    @property
    def encodings(self) -> Optional[Encodings]:
        return self.template.encodings


def coerce_pivot(pivot: Union[Pivot, Mapping[str, Any]]) -> Pivot:
    """Validate a pivot into a fresh model owned by one shaping call.

    Rows and pre-existing graph items are copied, so later in-place passes
    never touch the caller's objects.
    """
    if isinstance(pivot, Pivot):
        return pivot.model_copy(deep=True)
    if not isinstance(pivot, Mapping):
        raise ShapeError(
            f"Pivot must be a mapping, got {type(pivot).__name__}",
            code="INVALID_PIVOT",
        )
    try:
        return Pivot.model_validate(dict(pivot))
    except ValidationError as e:
        locs = [err["loc"] for err in e.errors()]
        if any(loc and loc[0] == "events" for loc in locs):
            raise ShapeError(f"Malformed event rows in pivot: {e}", code="INVALID_EVENT") from e
        raise ShapeError(f"Malformed pivot: {e}", code="INVALID_PIVOT") from e
