"""Tokenizer for bracketed, record-oriented text."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from gmlgraph.sexp.tree import Atom

TOKEN_PATTERN = re.compile(
    r"""
    (?P<ws>\s+)
    |(?P<comment>\#[^\n]*)
    |(?P<string>"(?:[^"\\]|\\.)*")
    |(?P<open_paren>\()
    |(?P<close_paren>\))
    |(?P<open_bracket>\[)
    |(?P<close_bracket>\])
    |(?P<open_curly>\{)
    |(?P<close_curly>\})
    |(?P<word>[^\s()\[\]{}"\#]+)
    |(?P<error>.)
    """,
    re.VERBOSE | re.DOTALL,
)

UINT_PATTERN = re.compile(r"^\+?[0-9]+$")
SINT_PATTERN = re.compile(r"^-[0-9]+$")
FLOAT_PATTERN = re.compile(r"^[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+(?=[eE]))(?:[eE][+-]?[0-9]+)?$")
ESCAPE_PATTERN = re.compile(r"\\(.)", re.DOTALL)


class TokenKind(Enum):
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"
    OPEN_CURLY = "{"
    CLOSE_CURLY = "}"
    ATOM = "atom"
    COMMENT = "comment"
    ERROR = "error"


@dataclass(frozen=True)
class Token:
    """A single lexical token with its offset in the source text."""

    kind: TokenKind
    value: Union[Atom, str, None] = None
    offset: int = 0


def classify_word(word: str) -> Atom:
    """Turn a bare word into a numeric atom when it looks like one, else a string atom.

    Words such as ``true`` stay strings; BOOL and UNIT atoms only appear in
    trees built in code.
    """
    if UINT_PATTERN.match(word):
        return Atom.from_uint(int(word))
    if SINT_PATTERN.match(word):
        return Atom.from_sint(int(word))
    if FLOAT_PATTERN.match(word):
        return Atom.from_float(float(word))
    return Atom.from_str(word)


def _unescape(quoted: str) -> str:
    return ESCAPE_PATTERN.sub(r"\1", quoted[1:-1])


class Tokenizer:
    """Iterates over the tokens of ``text``.

    Whitespace is dropped. Comments start with ``#`` and run to the end of the
    line; they are dropped too unless ``ignore_comments`` is false. Characters
    that cannot start any token, such as the quote of an unterminated string,
    come out as ``ERROR`` tokens and are left for the parser to reject.
    """

    _DELIMITERS = {
        "open_paren": TokenKind.OPEN_PAREN,
        "close_paren": TokenKind.CLOSE_PAREN,
        "open_bracket": TokenKind.OPEN_BRACKET,
        "close_bracket": TokenKind.CLOSE_BRACKET,
        "open_curly": TokenKind.OPEN_CURLY,
        "close_curly": TokenKind.CLOSE_CURLY,
    }

    def __init__(self, text: str, ignore_comments: bool = True) -> None:
        self.text = text
        self.ignore_comments = ignore_comments

    def __iter__(self) -> Iterator[Token]:
        for match in TOKEN_PATTERN.finditer(self.text):
            group = match.lastgroup
            lexeme = match.group()
            offset = match.start()
            if group == "ws":
                continue
            if group == "comment":
                if not self.ignore_comments:
                    yield Token(TokenKind.COMMENT, lexeme[1:].strip(), offset)
                continue
            if group == "string":
                yield Token(TokenKind.ATOM, Atom.from_str(_unescape(lexeme)), offset)
            elif group == "word":
                yield Token(TokenKind.ATOM, classify_word(lexeme), offset)
            elif group in self._DELIMITERS:
                yield Token(self._DELIMITERS[group], None, offset)
            else:
                yield Token(TokenKind.ERROR, lexeme, offset)

    def with_curly_around(self) -> Iterator[Token]:
        """Yield the tokens as if the whole text were enclosed in ``{`` and ``}``."""
        yield Token(TokenKind.OPEN_CURLY, None, 0)
        yield from self
        yield Token(TokenKind.CLOSE_CURLY, None, len(self.text))


def tokenize(text: str, ignore_comments: bool = True, curly_around: bool = False) -> Iterator[Token]:
    tokenizer = Tokenizer(text, ignore_comments=ignore_comments)
    if curly_around:
        return tokenizer.with_curly_around()
    return iter(tokenizer)


def describe(token: Optional[Token]) -> str:
    if token is None:
        return "end of input"
    if token.kind is TokenKind.ATOM:
        return f"atom {token.value!r} at offset {token.offset}"
    return f"{token.kind.value!r} at offset {token.offset}"
