"""Data models for the loading layer."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from gmlgraph.graph.builder import WeightedDiGraph


def _numeric(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


class GraphSummary(BaseModel):
    """Counts and numeric weights of one parsed graph."""

    source: str = Field(..., description="Path or name the document was read from")
    node_count: int
    edge_count: int
    directed: bool = True
    node_weights: List[Optional[float]] = Field(default_factory=list)
    edges: List[Tuple[int, int, Optional[float]]] = Field(default_factory=list)


class LoadBatch(BaseModel):
    """Graphs loaded from several documents, with one issue per document that failed."""

    summaries: List[GraphSummary] = Field(default_factory=list)
    issues: List[str] = Field(default_factory=list)
    graphs: Dict[str, Any] = Field(default_factory=dict, exclude=True)

    def iter_graphs(self) -> Iterable[Tuple[str, WeightedDiGraph]]:
        return iter(self.graphs.items())


def summarize_graph(graph: WeightedDiGraph, source: str) -> GraphSummary:
    return GraphSummary(
        source=source,
        node_count=graph.node_count(),
        edge_count=graph.edge_count(),
        directed=graph.is_directed(),
        node_weights=[_numeric(w) for w in graph.node_weights()],
        edges=[(s, t, _numeric(w)) for s, t, w in graph.edge_references()],
    )
