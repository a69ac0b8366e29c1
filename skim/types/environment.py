"""Runtime environment (frame chain) for Skim.

A frame is an ordered sequence of bindings plus an optional parent. New
bindings are prepended, so a scan sees the most recent binding first and
shadowing within one frame is allowed. The root of every chain is the global
frame; `define` always writes there.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from skim import LispValue
from skim.errors import SkimInvalidSymbol, SkimUnboundVariable
from skim.runtime_context import track
from skim.types.symbol import Symbol


class Binding:
    """A mutable (symbol, value) cell; set! updates `value` in place."""

    __slots__ = ("symbol", "value")

    def __init__(self, symbol: Symbol, value: LispValue):
        self.symbol = symbol
        self.value = value

    def __repr__(self) -> str:
        return f"Binding({self.symbol}, {self.value!r})"


class Environment:
    """One lexical frame with a link to its parent frame."""

    __slots__ = ("bindings", "parent")

    def __init__(self, parent: Optional[Environment] = None):
        # Stored oldest-first; scans walk the list backwards
        self.bindings: list[Binding] = []
        self.parent: Environment | None = parent
        track(self)

    @property
    def global_frame(self) -> Environment:
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def bind(self, name: Symbol, value: LispValue) -> Binding:
        """Prepend a binding for `name` to this frame and return its cell.

        Raises SkimInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SkimInvalidSymbol(f"Cannot bind {name!r}: not a symbol")
        binding = Binding(name, value)
        self.bindings.append(binding)
        return binding

    def define_global(self, name: Symbol, value: LispValue) -> None:
        """Prepend a binding to the global frame, whatever frame this is."""
        self.global_frame.bind(name, value)

    def local(self, name: Symbol) -> Optional[Binding]:
        """The most recent binding of `name` in this frame only."""
        for binding in reversed(self.bindings):
            if binding.symbol == name:
                return binding
        return None

    def find(self, name: Symbol) -> Optional[Binding]:
        """Find the nearest binding of `name` along the chain."""
        env: Optional[Environment] = self
        while env is not None:
            binding = env.local(name)
            if binding is not None:
                return binding
            env = env.parent
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises SkimUnboundVariable if no frame in the chain binds it.
        """
        binding = self.find(name)
        if binding is None:
            raise SkimUnboundVariable(f"Unbound variable {name}")
        return binding.value

    def set(self, name: Symbol, value: LispValue) -> None:
        """Overwrite the nearest existing binding of `name`.

        Raises SkimUnboundVariable if the symbol is not bound anywhere.
        """
        if not isinstance(name, Symbol):
            raise SkimInvalidSymbol(f"Cannot set {name!r}: not a symbol")
        binding = self.find(name)
        if binding is None:
            raise SkimUnboundVariable(f"Cannot set! unbound variable {name}")
        binding.value = value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.bind(k, v)

    def __iter__(self) -> Iterator[Binding]:
        return reversed(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{b.symbol}: {b.value!r}" for b in self))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.parent
        return "<Environment chain: " + " -> ".join(chain) + ">"
