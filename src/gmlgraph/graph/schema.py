"""GML graph-section schema definitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

E = TypeVar("E")

NodeIndex = int
EdgeIndex = int


@dataclass
class PendingEdge(Generic[E]):
    """An accepted edge entry whose endpoints are still external identifiers."""

    source: int
    target: int
    weight: E


@dataclass(frozen=True)
class GraphSchema:
    """Declarative key names of a GML graph section."""

    section: str = "graph"
    directed: str = "directed"
    node: str = "node"
    edge: str = "edge"
    node_id: str = "id"
    source: str = "source"
    target: str = "target"
    weight: str = "weight"
