"""Builds a generic tree out of a token stream."""
from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from gmlgraph.sexp.tokens import Token, TokenKind, describe, tokenize
from gmlgraph.sexp.tree import Atom, Sexp, SexpArray, SexpMap, SexpParseError, SexpTuple

OPENERS = {
    TokenKind.OPEN_PAREN: TokenKind.CLOSE_PAREN,
    TokenKind.OPEN_BRACKET: TokenKind.CLOSE_BRACKET,
    TokenKind.OPEN_CURLY: TokenKind.CLOSE_CURLY,
}
CLOSERS = frozenset(OPENERS.values())


def _close(kind: TokenKind, items: List[Sexp], token: Token) -> Sexp:
    if kind is TokenKind.CLOSE_PAREN:
        return SexpTuple(tuple(items))
    if kind is TokenKind.CLOSE_BRACKET:
        return SexpArray(tuple(items))
    if len(items) % 2:
        raise SexpParseError(f"map closed by {describe(token)} has a key without a value")
    return SexpMap(tuple(zip(items[0::2], items[1::2])))


def parse_tokens(tokens: Iterable[Token]) -> Sexp:
    """Parse exactly one value from ``tokens``.

    Comment tokens are skipped. Error tokens, unbalanced delimiters, trailing
    values and an empty stream all raise :class:`SexpParseError`.
    """
    stack: List[Tuple[TokenKind, List[Sexp]]] = []
    result: Optional[Sexp] = None

    for token in tokens:
        if token.kind is TokenKind.COMMENT:
            continue
        if result is not None:
            raise SexpParseError(f"unexpected {describe(token)} after the document")
        if token.kind is TokenKind.ERROR:
            raise SexpParseError(f"invalid input {token.value!r} at offset {token.offset}")

        if token.kind in OPENERS:
            stack.append((OPENERS[token.kind], []))
            continue

        if token.kind in CLOSERS:
            if not stack or stack[-1][0] is not token.kind:
                raise SexpParseError(f"unbalanced {describe(token)}")
            closer, items = stack.pop()
            value = _close(closer, items, token)
        elif isinstance(token.value, Atom):
            value = token.value
        else:
            raise SexpParseError(f"unexpected {describe(token)}")

        if stack:
            stack[-1][1].append(value)
        else:
            result = value

    if stack:
        raise SexpParseError("unexpected end of input")
    if result is None:
        raise SexpParseError("empty document")
    return result


def parse(text: str) -> Sexp:
    return parse_tokens(tokenize(text))
