"""Handler types and registration for the shaping pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Optional

from pivotgraph.pipeline.context import ShapeContext
from pivotgraph.pipeline.shape_object import ShapeObject


class HandlerType(StrEnum):
    Extract = "extract"
    Encode = "encode"
    Normalize = "normalize"
    Dedupe = "dedupe"
    Infer = "infer"
    Summarize = "summarize"
    Final = "final"


@dataclass
class Handler:
    handler_type: HandlerType
    fn: Callable[[ShapeContext, ShapeObject], Optional[ShapeObject]]

    def __call__(self, ctx: ShapeContext, sobj: ShapeObject) -> Optional[ShapeObject]:
        return self.fn(ctx, sobj)
