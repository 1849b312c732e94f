"""Tests for loading GML documents from disk."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from gmlgraph.errors import InvalidDocumentError
from gmlgraph.graph.weights import float_weight, unit_weight
from gmlgraph.ingest.loader import load_gml_file, load_gml_files
from gmlgraph.ingest.models import summarize_graph

if TYPE_CHECKING:
    from pathlib import Path


def test_load_gml_file(tmp_path: Path, sample_gml: str) -> None:
    path = tmp_path / "sample.gml"
    path.write_text(sample_gml, encoding="utf-8")

    graph = load_gml_file(path, float_weight(), unit_weight)

    assert graph.node_weights() == [1.0, 0.0]
    assert graph.edge_count() == 2


def test_load_uses_configured_encoding(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "latin.gml"
    path.write_bytes('graph [ directed 1 node [ id 1 weight "caf\xe9" ] ]'.encode("latin-1"))
    monkeypatch.setenv("GMLGRAPH_ENCODING", "latin-1")

    graph = load_gml_file(path, lambda w: w.get_str(), unit_weight)

    assert graph.node_weights() == ["caf\xe9"]


def test_load_invalid_file(tmp_path: Path) -> None:
    path = tmp_path / "broken.gml"
    path.write_text("graph [ directed 1", encoding="utf-8")
    with pytest.raises(InvalidDocumentError):
        load_gml_file(path, unit_weight, unit_weight)


def test_load_gml_files_collects_issues(tmp_path: Path, sample_gml: str) -> None:
    good = tmp_path / "good.gml"
    good.write_text(sample_gml, encoding="utf-8")
    undirected = tmp_path / "undirected.gml"
    undirected.write_text("graph [ directed 0 ]", encoding="utf-8")
    missing = tmp_path / "missing.gml"

    batch = load_gml_files([good, undirected, missing], float_weight(), float_weight())

    assert [s.source for s in batch.summaries] == [str(good)]
    assert len(batch.issues) == 2
    assert batch.issues[0] == f"{undirected}: only directed graph supported"
    assert batch.issues[1].startswith(str(missing))
    assert dict(batch.iter_graphs())[str(good)].node_count() == 2


def test_summarize_graph(tmp_path: Path, sample_gml: str) -> None:
    path = tmp_path / "sample.gml"
    path.write_text(sample_gml, encoding="utf-8")
    graph = load_gml_file(path, float_weight(), unit_weight)

    summary = summarize_graph(graph, "sample")

    assert summary.node_count == 2
    assert summary.edge_count == 2
    assert summary.directed is True
    assert summary.node_weights == [1.0, 0.0]
    assert summary.edges == [(0, 1, None), (1, 0, None)]


def test_batch_json_leaves_graph_objects_out(tmp_path: Path, sample_gml: str) -> None:
    path = tmp_path / "sample.gml"
    path.write_text(sample_gml, encoding="utf-8")
    batch = load_gml_files([path], float_weight(), float_weight())

    dumped = batch.model_dump()

    assert "graphs" not in dumped
    assert dumped["summaries"][0]["edges"] == [(0, 1, 1.1), (1, 0, 0.0)]
