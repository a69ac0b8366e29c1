"""Closure representation for Skim."""

from __future__ import annotations

from skim import SExpression
from skim.runtime_context import track
from skim.types.environment import Environment
from skim.types.symbol import Symbol


class Closure:
    """A lambda's parameters and single body expression, plus the frame it was created in.

    The frame is shared, not copied: every application builds a fresh child of
    `env`, so all invocations see the same captured parent.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment = env
        track(self)

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return "#<procedure>"

    def __repr__(self) -> str:
        from skim.printer import to_string
        params = " ".join(str(p) for p in self.params)
        return f"<Closure ({params}) {to_string(self.body)}>"
