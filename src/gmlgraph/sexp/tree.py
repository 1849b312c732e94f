"""Generic nested-record tree: atoms, tuples, arrays and maps."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Optional, Tuple


class SexpError(ValueError):
    """Base class for errors raised by the generic tree layer."""


class SexpShapeError(SexpError):
    """Raised when a value does not have the shape a caller asked for."""


class SexpParseError(SexpError):
    """Raised when a token stream does not form exactly one well-balanced value."""


class AtomKind(Enum):
    UINT = "uint"
    SINT = "sint"
    FLOAT = "float"
    STR = "str"
    BOOL = "bool"
    UNIT = "unit"


class Sexp:
    """Base class for every value of the generic tree.

    Accessors return ``None`` when the value is not of the requested kind, so
    callers can test and extract in one step.
    """

    def get_uint(self) -> Optional[int]:
        return None

    def get_int(self) -> Optional[int]:
        return None

    def get_float(self) -> Optional[float]:
        return None

    def get_str(self) -> Optional[str]:
        return None

    def get_bool(self) -> Optional[bool]:
        return None

    def into_map(self) -> Dict[str, Sexp]:
        raise SexpShapeError("not a map")


@dataclass(frozen=True)
class Atom(Sexp):
    """A scalar value tagged with its lexical kind."""

    kind: AtomKind
    value: object = None

    @classmethod
    def from_uint(cls, value: int) -> Atom:
        if value < 0:
            raise SexpShapeError(f"unsigned atom cannot hold {value}")
        return cls(AtomKind.UINT, value)

    @classmethod
    def from_sint(cls, value: int) -> Atom:
        return cls(AtomKind.SINT, value)

    @classmethod
    def from_float(cls, value: float) -> Atom:
        return cls(AtomKind.FLOAT, value)

    @classmethod
    def from_str(cls, value: str) -> Atom:
        return cls(AtomKind.STR, value)

    @classmethod
    def from_bool(cls, value: bool) -> Atom:
        return cls(AtomKind.BOOL, value)

    def get_uint(self) -> Optional[int]:
        if self.kind is AtomKind.UINT:
            return self.value  # type: ignore[return-value]
        return None

    def get_int(self) -> Optional[int]:
        if self.kind in (AtomKind.UINT, AtomKind.SINT):
            return self.value  # type: ignore[return-value]
        return None

    def get_float(self) -> Optional[float]:
        if self.kind is AtomKind.FLOAT:
            return self.value  # type: ignore[return-value]
        if self.kind in (AtomKind.UINT, AtomKind.SINT):
            return float(self.value)  # type: ignore[arg-type]
        return None

    def get_str(self) -> Optional[str]:
        if self.kind is AtomKind.STR:
            return self.value  # type: ignore[return-value]
        return None

    def get_bool(self) -> Optional[bool]:
        if self.kind is AtomKind.BOOL:
            return self.value  # type: ignore[return-value]
        return None


UNIT = Atom(AtomKind.UNIT)


@dataclass(frozen=True)
class SexpTuple(Sexp):
    """Ordered values written between ``(`` and ``)``."""

    items: Tuple[Sexp, ...] = ()

    def __iter__(self) -> Iterator[Sexp]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class SexpArray(Sexp):
    """Ordered values written between ``[`` and ``]``."""

    items: Tuple[Sexp, ...] = ()

    def __iter__(self) -> Iterator[Sexp]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class SexpMap(Sexp):
    """Key/value pairs written between ``{`` and ``}``.

    The pairs keep their source order and a key may repeat, which is how a
    section lists several records under the same name. ``into_map`` gives the
    strict dictionary view, with unique string keys.
    """

    pairs: Tuple[Tuple[Sexp, Sexp], ...] = ()

    def __iter__(self) -> Iterator[Tuple[Sexp, Sexp]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def items(self) -> Iterator[Tuple[Sexp, Sexp]]:
        return iter(self.pairs)

    def get(self, key: str) -> Optional[Sexp]:
        """Return the value of the first pair whose key is the string ``key``."""
        for k, v in self.pairs:
            if k.get_str() == key:
                return v
        return None

    def into_map(self) -> Dict[str, Sexp]:
        result: Dict[str, Sexp] = {}
        for k, v in self.pairs:
            key = k.get_str()
            if key is None:
                raise SexpShapeError("map key is not a string")
            if key in result:
                raise SexpShapeError("duplicate key")
            result[key] = v
        return result
