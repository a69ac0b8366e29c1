from __future__ import annotations

from typing import Callable

from skim import LispValue

PrimitiveFn = Callable[..., LispValue]


class Primitive:
    """A native procedure. `fn(env, args)` receives already-evaluated arguments."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: PrimitiveFn):
        self.name = name
        self.fn = fn

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __str__(self) -> str:
        return f"#<primitive {self.name}>"

    __repr__ = __str__
