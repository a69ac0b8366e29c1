"""
  Skim lexer

Turns program text into a flat stream of typed tokens. Literal tokens carry
their converted Python value:

    - integer -> int
    - double  -> float
    - string  -> str (quotes removed, escapes resolved)
    - boolean -> bool (#t / #f)
    - symbol  -> Symbol
    - lparen / rparen / quote -> the punctuation character
"""

from __future__ import annotations

import re
from typing import Iterator

from skim.errors import SkimSyntaxError
from skim.types.symbol import Symbol
from skim.types.values import in_int_range

Token = tuple[str, object]

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<atom>[^\s()\'";]+)'  # numbers, booleans, symbols
)

INTEGER_RE = re.compile(r"[+-]?\d+")
DOUBLE_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+)")
# Anything starting like this must be a number
NUMERIC_START_RE = re.compile(r"[+-]?\.?\d")
# significant digits in the widest 64-bit integer
MAX_INTEGER_DIGITS = 19

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


def _unescape(body: str, pos: int) -> str:
    out = []
    i = 0
    while i < len(body):
        c = body[i]
        if c == "\\":
            nxt = body[i + 1]
            if nxt not in ESCAPES:
                raise SkimSyntaxError(f"Unknown escape \\{nxt} in string at {pos}")
            out.append(ESCAPES[nxt])
            i += 2
        else:
            out.append(c)
            i += 1
    return "".join(out)


def _parse_integer(text: str, pos: int) -> int:
    # length check first so huge literals never reach int()
    digits = text.lstrip("+-").lstrip("0")
    if len(digits) > MAX_INTEGER_DIGITS or not in_int_range(int(text)):
        raise SkimSyntaxError(f"Malformed numeric literal {text!r} at {pos}: out of 64-bit range")
    return int(text)


def classify_atom(text: str, pos: int = 0) -> Token:
    """Convert one atom's text into an integer, double, boolean or symbol token."""
    if text.startswith("#"):
        if text == "#t":
            return "boolean", True
        if text == "#f":
            return "boolean", False
        raise SkimSyntaxError(f"Malformed # token {text!r} at {pos}")
    if INTEGER_RE.fullmatch(text):
        return "integer", _parse_integer(text, pos)
    if DOUBLE_RE.fullmatch(text):
        return "double", float(text)
    if NUMERIC_START_RE.match(text):
        raise SkimSyntaxError(f"Malformed numeric literal {text!r} at {pos}")
    return "symbol", Symbol(text)


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_kind, token_value) tuples."""
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue

        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise SkimSyntaxError(f"Unterminated string literal starting at {pos}")
            raise SkimSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")

        kind = m.lastgroup
        text = m.group(kind)
        if kind == "comment":
            pass
        elif kind == "string":
            yield "string", _unescape(text[1:-1], pos)
        elif kind == "atom":
            yield classify_atom(text, pos)
        else:
            yield kind, text
        pos = m.end()
