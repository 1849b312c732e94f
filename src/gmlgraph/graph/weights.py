"""Weight mappers turning an optional weight sub-tree into a node or edge payload."""
from __future__ import annotations

from typing import Callable, Optional, Protocol, Tuple, TypeVar

from gmlgraph.sexp.tree import UNIT, Sexp

T_co = TypeVar("T_co", covariant=True)


class WeightFn(Protocol[T_co]):
    """Maps the ``weight`` value of an entry (``None`` when absent) to a payload.

    Returning ``None`` rejects the entry and fails the whole parse.
    """

    def __call__(self, weight: Optional[Sexp]) -> Optional[T_co]:
        ...


def float_weight(default: float = 0.0) -> Callable[[Optional[Sexp]], Optional[float]]:
    """Accept numeric weights as floats; a missing weight becomes ``default``."""

    def mapper(weight: Optional[Sexp]) -> Optional[float]:
        if weight is None:
            return default
        return weight.get_float()

    return mapper


def int_weight(default: int = 0) -> Callable[[Optional[Sexp]], Optional[int]]:
    def mapper(weight: Optional[Sexp]) -> Optional[int]:
        if weight is None:
            return default
        return weight.get_int()

    return mapper


def string_weight(default: str = "") -> Callable[[Optional[Sexp]], Optional[str]]:
    def mapper(weight: Optional[Sexp]) -> Optional[str]:
        if weight is None:
            return default
        return weight.get_str()

    return mapper


def raw_weight(weight: Optional[Sexp]) -> Sexp:
    """Keep the weight sub-tree as it is, with the unit atom standing in for a missing one."""
    return UNIT if weight is None else weight


def unit_weight(weight: Optional[Sexp]) -> Tuple[()]:
    return ()
