"""pivotgraph: shape tabular event search results into an entity hypergraph."""

from pivotgraph.errors import ShapeError
from pivotgraph.models import Pivot, ResultSummary
from pivotgraph.shape_results import shape_results

__all__ = [
    "shape_results",
    "Pivot",
    "ResultSummary",
    "ShapeError",
]
