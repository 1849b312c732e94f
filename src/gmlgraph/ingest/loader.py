"""File loading utilities for GML documents."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, TypeVar

from gmlgraph.config import get_settings
from gmlgraph.errors import GmlError
from gmlgraph.graph.builder import WeightedDiGraph
from gmlgraph.graph.weights import WeightFn
from gmlgraph.ingest.models import LoadBatch, summarize_graph
from gmlgraph.parser import parse_gml

logger = logging.getLogger(__name__)

N = TypeVar("N")
E = TypeVar("E")


def load_gml_file(
    path: Path,
    node_weight_fn: WeightFn[N],
    edge_weight_fn: WeightFn[E],
    encoding: Optional[str] = None,
) -> WeightedDiGraph[N, E]:
    """Read ``path`` and parse it as a directed GML graph."""
    text = Path(path).read_text(encoding=encoding or get_settings().encoding)
    return parse_gml(text, node_weight_fn, edge_weight_fn)


def load_gml_files(
    paths: Iterable[Path],
    node_weight_fn: WeightFn[N],
    edge_weight_fn: WeightFn[E],
    encoding: Optional[str] = None,
) -> LoadBatch:
    """Load several documents; a document that fails is recorded as an issue and skipped."""
    batch = LoadBatch()
    for path in paths:
        source = str(path)
        try:
            graph = load_gml_file(path, node_weight_fn, edge_weight_fn, encoding=encoding)
        except (GmlError, OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping %s: %s", source, exc)
            batch.issues.append(f"{source}: {exc}")
            continue
        batch.graphs[source] = graph
        batch.summaries.append(summarize_graph(graph, source))
    return batch
