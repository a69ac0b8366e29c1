"""Textual rendering of Skim values and token streams."""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from skim import LispValue
from skim.config import get_double_format
from skim.types.closure import Closure
from skim.types.nil import NilType, VoidType
from skim.types.pair import Pair
from skim.types.primitive import Primitive
from skim.types.symbol import Symbol

STRING_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\t": "\\t"}


def format_double(value: float) -> str:
    return get_double_format() % value


def format_string(value: str) -> str:
    return '"' + "".join(STRING_ESCAPES.get(c, c) for c in value) + '"'


def _write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, bool):
        buffer.write("#t" if value else "#f")
    elif isinstance(value, int):
        buffer.write(str(value))
    elif isinstance(value, float):
        buffer.write(format_double(value))
    elif isinstance(value, str):
        buffer.write(format_string(value))
    elif isinstance(value, Symbol):
        buffer.write(value.id)
    elif isinstance(value, NilType):
        buffer.write("()")
    elif isinstance(value, Pair):
        buffer.write("(")
        _write(value.car, buffer)
        rest = value.cdr
        while isinstance(rest, Pair):
            buffer.write(" ")
            _write(rest.car, buffer)
            rest = rest.cdr
        if not isinstance(rest, NilType):
            buffer.write(" . ")
            _write(rest, buffer)
        buffer.write(")")
    elif isinstance(value, (Closure, Primitive)):
        buffer.write(str(value))
    elif isinstance(value, VoidType):
        pass
    else:
        buffer.write(f"#<{type(value).__name__}>")


def to_string(value: LispValue) -> str:
    """Render a value the way the interpreter prints results."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def format_tokens(tokens: Iterable[tuple[str, object]]) -> str:
    """One `value : kind` line per token."""
    lines = []
    for kind, value in tokens:
        text = value if kind in ("lparen", "rparen", "quote") else to_string(value)
        lines.append(f"{text} : {kind}")
    return "\n".join(lines)
