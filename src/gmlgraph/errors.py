"""Errors raised while turning GML text into a graph.

Every error carries one fixed message (``str(exc)``) so callers can match on
it; extra detail such as the offending identifier lives in attributes.
"""
from __future__ import annotations

from typing import Optional


class GmlError(ValueError):
    """Base class for every failure of a GML parse."""

    message = "Invalid GML"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidDocumentError(GmlError):
    """The text could not be tokenized or parsed into a generic tree."""


class GmlStructureError(GmlError):
    """The tree does not have the shape of a GML document."""

    NOT_A_MAP = "not a map"
    NO_GRAPH = "no graph given or invalid"
    INVALID_ITEM = "invalid item"

    message = NOT_A_MAP


class UndirectedGraphError(GmlError):
    """The graph section is not declared with ``directed 1``."""

    message = "only directed graph supported"


class InvalidIdentifierError(GmlError):
    """A node ``id`` or an edge ``source``/``target`` is missing or not an unsigned integer."""

    ID = "Invalid id"
    SOURCE = "Invalid source id"
    TARGET = "Invalid target id"

    message = ID


class DuplicateNodeIdError(GmlError):
    message = "duplicate node-id"

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__()


class UnknownNodeIdError(GmlError):
    """An edge endpoint names an identifier no node entry declared."""

    def __init__(self, node_id: int, endpoint: str) -> None:
        self.node_id = node_id
        self.endpoint = endpoint
        super().__init__(f"unknown {endpoint} id")


class WeightRejectedError(GmlError):
    """A weight mapper returned no payload for a node or edge weight."""

    NODE = "invalid node weight"
    EDGE = "invalid edge weight"

    message = NODE
