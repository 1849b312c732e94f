"""Directed graph construction from the generic tree of a GML document."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar

import networkx as nx

from gmlgraph.errors import (
    DuplicateNodeIdError,
    GmlStructureError,
    InvalidIdentifierError,
    UndirectedGraphError,
    UnknownNodeIdError,
    WeightRejectedError,
)
from gmlgraph.graph.schema import EdgeIndex, GraphSchema, NodeIndex, PendingEdge
from gmlgraph.graph.weights import WeightFn
from gmlgraph.sexp.tree import Sexp, SexpMap, SexpShapeError

logger = logging.getLogger(__name__)

N = TypeVar("N")
E = TypeVar("E")

DEFAULT_SCHEMA = GraphSchema()


@dataclass
class WeightedDiGraph(Generic[N, E]):
    """Directed multigraph whose nodes and edges carry one weight payload each.

    Nodes are addressed by the position ``add_node`` returns (0, 1, 2, ...);
    edges by the position ``add_edge`` returns, which is also their key in the
    underlying networkx graph.
    """

    graph: nx.MultiDiGraph = field(default_factory=nx.MultiDiGraph)
    endpoints: List[Tuple[NodeIndex, NodeIndex]] = field(default_factory=list, repr=False)

    def add_node(self, weight: N) -> NodeIndex:
        index = self.graph.number_of_nodes()
        self.graph.add_node(index, weight=weight)
        return index

    def add_edge(self, source: NodeIndex, target: NodeIndex, weight: E) -> EdgeIndex:
        if not (self.graph.has_node(source) and self.graph.has_node(target)):
            raise IndexError(f"edge {source} -> {target} refers to a missing node")
        index = len(self.endpoints)
        self.graph.add_edge(source, target, key=index, weight=weight)
        self.endpoints.append((source, target))
        return index

    def is_directed(self) -> bool:
        return self.graph.is_directed()

    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def node_weight(self, index: NodeIndex) -> Optional[N]:
        if not self.graph.has_node(index):
            return None
        return self.graph.nodes[index]["weight"]

    def edge_weight(self, index: EdgeIndex) -> Optional[E]:
        endpoints = self.edge_endpoints(index)
        if endpoints is None:
            return None
        source, target = endpoints
        return self.graph.edges[source, target, index]["weight"]

    def edge_endpoints(self, index: EdgeIndex) -> Optional[Tuple[NodeIndex, NodeIndex]]:
        if not 0 <= index < len(self.endpoints):
            return None
        return self.endpoints[index]

    def find_edge(self, source: NodeIndex, target: NodeIndex) -> Optional[EdgeIndex]:
        """Return the first edge added from ``source`` to ``target``, if any."""
        parallel = self.graph.get_edge_data(source, target)
        if not parallel:
            return None
        return min(parallel)

    def node_weights(self) -> List[N]:
        return [weight for _, weight in self.graph.nodes(data="weight")]

    def edge_references(self) -> Iterator[Tuple[NodeIndex, NodeIndex, E]]:
        """Yield ``(source, target, weight)`` for every edge in insertion order."""
        for index, (source, target) in enumerate(self.endpoints):
            yield source, target, self.graph.edges[source, target, index]["weight"]

    def to_networkx(self) -> nx.MultiDiGraph:
        """Return a frozen copy of the underlying networkx graph."""
        return nx.freeze(self.graph.copy())


class GmlGraphBuilder(Generic[N, E]):
    """Interprets the generic tree of a GML document as a directed graph.

    Entries of the graph section are read once in declaration order. Nodes
    are added right away; edges are buffered and resolved against the node
    identifiers afterwards, so an edge may be declared before its endpoints.
    """

    def __init__(
        self,
        node_weight_fn: WeightFn[N],
        edge_weight_fn: WeightFn[E],
        schema: GraphSchema | None = None,
    ) -> None:
        self.node_weight_fn = node_weight_fn
        self.edge_weight_fn = edge_weight_fn
        self.schema = schema or DEFAULT_SCHEMA

    def build(self, tree: Sexp) -> WeightedDiGraph[N, E]:
        document = self._as_map(tree)
        section = document.pop(self.schema.section, None)
        if not isinstance(section, SexpMap):
            raise GmlStructureError(GmlStructureError.NO_GRAPH)

        graph: WeightedDiGraph[N, E] = WeightedDiGraph()
        node_map: Dict[int, NodeIndex] = {}
        pending: List[PendingEdge[E]] = []
        directed = False

        for key, value in section.items():
            name = key.get_str()
            if name == self.schema.directed:
                self._check_directed(value)
                directed = True
            elif name == self.schema.node:
                self._add_node(graph, node_map, value)
            elif name == self.schema.edge:
                pending.append(self._read_edge(value))
            else:
                raise GmlStructureError(GmlStructureError.INVALID_ITEM)

        if not directed:
            raise UndirectedGraphError()

        for edge in pending:
            self._resolve_edge(graph, node_map, edge)

        logger.debug(
            "Built graph with %d nodes and %d edges", graph.node_count(), graph.edge_count()
        )
        return graph

    @staticmethod
    def _as_map(value: Sexp) -> Dict[str, Sexp]:
        try:
            return value.into_map()
        except SexpShapeError as exc:
            raise GmlStructureError(str(exc)) from exc

    @staticmethod
    def _identifier(record: Dict[str, Sexp], key: str, message: str) -> int:
        value = record.get(key)
        identifier = value.get_uint() if value is not None else None
        if identifier is None:
            raise InvalidIdentifierError(message)
        return identifier

    def _check_directed(self, value: Sexp) -> None:
        if value.get_uint() != 1:
            raise UndirectedGraphError()

    def _add_node(self, graph: WeightedDiGraph[N, E], node_map: Dict[int, NodeIndex], value: Sexp) -> None:
        record = self._as_map(value)
        node_id = self._identifier(record, self.schema.node_id, InvalidIdentifierError.ID)

        weight = self.node_weight_fn(record.get(self.schema.weight))
        if weight is None:
            raise WeightRejectedError(WeightRejectedError.NODE)

        if node_id in node_map:
            raise DuplicateNodeIdError(node_id)
        node_map[node_id] = graph.add_node(weight)

    def _read_edge(self, value: Sexp) -> PendingEdge[E]:
        record = self._as_map(value)
        source = self._identifier(record, self.schema.source, InvalidIdentifierError.SOURCE)
        target = self._identifier(record, self.schema.target, InvalidIdentifierError.TARGET)

        weight = self.edge_weight_fn(record.get(self.schema.weight))
        if weight is None:
            raise WeightRejectedError(WeightRejectedError.EDGE)
        return PendingEdge(source=source, target=target, weight=weight)

    def _resolve_edge(
        self, graph: WeightedDiGraph[N, E], node_map: Dict[int, NodeIndex], edge: PendingEdge[E]
    ) -> None:
        if edge.source not in node_map:
            raise UnknownNodeIdError(edge.source, "source")
        if edge.target not in node_map:
            raise UnknownNodeIdError(edge.target, "target")
        graph.add_edge(node_map[edge.source], node_map[edge.target], edge.weight)
