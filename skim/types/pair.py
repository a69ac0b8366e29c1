"""Pairs and proper-list helpers.

Pairs are the only composite structure; a list is a chain of Pairs whose last
cdr is Nil. Helpers here refuse improper chains instead of truncating them.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from skim import LispValue
from skim.errors import SkimTypeError
from skim.runtime_context import track
from skim.types.nil import Nil


class Pair:
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car = car
        self.cdr = cdr
        track(self)

    def __eq__(self, other) -> bool:
        """Structural equality, used by tests and the reader; eq? uses identity."""
        if not isinstance(other, Pair):
            return NotImplemented
        a, b = self, other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if a.car != b.car or type(a.car) is not type(b.car):
                return False
            a, b = a.cdr, b.cdr
        return a == b and type(a) is type(b)

    __hash__ = None

    def __repr__(self) -> str:
        from skim.printer import to_string
        return to_string(self)


def from_list(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a chain of Pairs from a Python iterable, ending in `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def iter_list(value: LispValue, what: str = "list") -> Iterator[LispValue]:
    """Yield the elements of a proper list; raise on any non-Pair tail."""
    while isinstance(value, Pair):
        yield value.car
        value = value.cdr
    if value is not Nil:
        raise SkimTypeError(f"{what} is not a proper list")


def to_list(value: LispValue, what: str = "list") -> list[LispValue]:
    return list(iter_list(value, what))

