from __future__ import annotations
import sys


class Symbol:
    """A name in Skim source. Two symbols are equal when their names are."""

    __slots__ = ("id",)

    def __init__(self, name: str):
        # Interned so special-form and binding scans compare cheaply
        self.id = sys.intern(name)

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id is other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
