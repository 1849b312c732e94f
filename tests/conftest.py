"""Shared fixtures for gmlgraph tests."""

from __future__ import annotations

from typing import Iterator

import pytest

from gmlgraph.config import get_settings

SAMPLE_GML = """
# comment
graph
[
    directed 1
    node
    [
      id 1
      weight 1.0
    ]
    node
    [
      id 2
    ]
    edge
    [
       source 1
       target 2
       weight 1.1000
    ]
    edge
    [
       source 2
       target 1
    ]
]
"""


@pytest.fixture
def sample_gml() -> str:
    return SAMPLE_GML


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep environment overrides from leaking between tests through the settings cache."""
    monkeypatch.delenv("GMLGRAPH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GMLGRAPH_ENCODING", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
