"""Entry points turning GML text into a directed graph."""
from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

from gmlgraph.errors import InvalidDocumentError
from gmlgraph.graph.builder import GmlGraphBuilder, WeightedDiGraph
from gmlgraph.graph.weights import WeightFn
from gmlgraph.sexp.reader import parse_tokens
from gmlgraph.sexp.tokens import Token, Tokenizer, TokenKind
from gmlgraph.sexp.tree import Sexp, SexpError

N = TypeVar("N")
E = TypeVar("E")

BRACKET_TO_CURLY = {
    TokenKind.OPEN_BRACKET: TokenKind.OPEN_CURLY,
    TokenKind.CLOSE_BRACKET: TokenKind.CLOSE_CURLY,
}


def adapt_tokens(tokens: Iterable[Token]) -> Iterator[Token]:
    """Rewrite GML's ``[``/``]`` record delimiters into the generic ``{``/``}`` map delimiters."""
    for token in tokens:
        kind = BRACKET_TO_CURLY.get(token.kind)
        if kind is None:
            yield token
        else:
            yield Token(kind, token.value, token.offset)


def tokenize_gml(text: str) -> Iterator[Token]:
    return adapt_tokens(Tokenizer(text, ignore_comments=True).with_curly_around())


def parse_gml_to_sexp(text: str) -> Sexp:
    """Parse GML text into the generic tree, as if the whole document were one record."""
    try:
        return parse_tokens(tokenize_gml(text))
    except SexpError as exc:
        raise InvalidDocumentError() from exc


def sexp_to_graph(
    tree: Sexp,
    node_weight_fn: WeightFn[N],
    edge_weight_fn: WeightFn[E],
) -> WeightedDiGraph[N, E]:
    return GmlGraphBuilder(node_weight_fn, edge_weight_fn).build(tree)


def parse_gml(
    text: str,
    node_weight_fn: WeightFn[N],
    edge_weight_fn: WeightFn[E],
) -> WeightedDiGraph[N, E]:
    """Parse a GML document describing a directed graph.

    ``node_weight_fn`` and ``edge_weight_fn`` receive the ``weight`` sub-tree
    of each node and edge entry (``None`` when the entry has none) and return
    its payload, or ``None`` to reject the document.

    Raises:
        GmlError: the text is not a valid directed GML graph. ``str(exc)`` is
            one of the fixed messages defined in :mod:`gmlgraph.errors`.
    """
    return sexp_to_graph(parse_gml_to_sexp(text), node_weight_fn, edge_weight_fn)
